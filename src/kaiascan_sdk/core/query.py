"""URL path and query string composition."""

from typing import Any, List, Mapping, Optional
from urllib.parse import quote

from .endpoint import EndpointSpec
from .exceptions import ValidationError

# encodeURIComponent's unreserved set, plus "," so joined lists stay readable
QUERY_SAFE = "-_.!~*'(),"


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def format_value(value: Any) -> str:
    """Render a parameter value as the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


class QueryBuilder:
    """Turns an endpoint spec and request params into a relative URL.

    Validation happens here so that known-invalid input never reaches the
    transport.
    """

    def build(self, spec: EndpointSpec, params: Optional[Mapping[str, Any]] = None) -> str:
        params = dict(params or {})
        self._check_unknown(spec, params)

        path = self._build_path(spec, params)
        query = self._build_query(spec, params)
        return f"{path}?{query}" if query else path

    def _check_unknown(self, spec: EndpointSpec, params: Mapping[str, Any]) -> None:
        known = set(spec.param_names)
        for name, value in params.items():
            if name not in known:
                raise ValidationError(name, value, f"unknown parameter for {spec.name}")

    def _build_path(self, spec: EndpointSpec, params: Mapping[str, Any]) -> str:
        encoded = {}
        for name in spec.path_params:
            value = params.get(name)
            if is_empty(value):
                raise ValidationError(name, value, "is required")
            rule = spec.path_rule(name)
            if rule is not None and rule.validate is not None and not rule.validate(value):
                raise ValidationError(name, value, rule.reason)
            # Encode each value on its own; the template's separators stay as-is
            encoded[name] = quote(format_value(value), safe="")
        return spec.path_template.format(**encoded)

    def _build_query(self, spec: EndpointSpec, params: Mapping[str, Any]) -> str:
        pairs: List[str] = []
        for param in spec.query_params:
            value = params.get(param.name)
            if is_empty(value):
                if param.required:
                    raise ValidationError(param.name, value, "is required")
                continue
            if param.validate is not None and not param.validate(value):
                raise ValidationError(param.name, value, param.reason)
            pairs.append(
                f"{quote(param.name, safe=QUERY_SAFE)}={quote(format_value(value), safe=QUERY_SAFE)}"
            )
        return "&".join(pairs)

"""Static endpoint descriptions shared by every call to an operation."""

from dataclasses import dataclass
from string import Formatter
from typing import Any, Callable, Optional, Tuple

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000

Validator = Callable[[Any], bool]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_non_negative_int(value: Any) -> bool:
    return _is_int(value) and value >= 0


@dataclass(frozen=True)
class QueryParam:
    """A single path or query parameter of an endpoint."""

    name: str
    required: bool = False
    validate: Optional[Validator] = None
    reason: str = "invalid value"


PAGE = QueryParam(
    "page",
    validate=lambda value: _is_int(value) and value >= 1,
    reason="must be an integer >= 1",
)
SIZE = QueryParam(
    "size",
    validate=lambda value: _is_int(value) and 1 <= value <= MAX_PAGE_SIZE,
    reason=f"must be an integer between 1 and {MAX_PAGE_SIZE}",
)
PAGINATION_PARAMS = (PAGE, SIZE)


@dataclass(frozen=True)
class EndpointSpec:
    """Description of one logical API operation.

    Path parameters are named ``{placeholders}`` in ``path_template`` and are
    substituted in declared order; ``path_rules`` attaches validators to some
    of them. Paginated specs always declare ``page`` and ``size`` ahead of
    their own filters.
    """

    name: str
    path_template: str
    path_params: Tuple[str, ...] = ()
    query_params: Tuple[QueryParam, ...] = ()
    paginated: bool = False
    path_rules: Tuple[QueryParam, ...] = ()

    def __post_init__(self):
        placeholders = _placeholders(self.path_template)
        if placeholders != self.path_params:
            raise ValueError(
                f"Endpoint '{self.name}' declares path params {self.path_params} "
                f"but its template has {placeholders}"
            )
        for rule in self.path_rules:
            if rule.name not in self.path_params:
                raise ValueError(f"Endpoint '{self.name}' has a rule for unknown path param '{rule.name}'")
        if self.paginated:
            own = tuple(p for p in self.query_params if p.name not in ("page", "size"))
            object.__setattr__(self, "query_params", PAGINATION_PARAMS + own)

    @property
    def param_names(self) -> Tuple[str, ...]:
        return self.path_params + tuple(p.name for p in self.query_params)

    def path_rule(self, name: str) -> Optional[QueryParam]:
        for rule in self.path_rules:
            if rule.name == name:
                return rule
        return None


def _placeholders(template: str) -> Tuple[str, ...]:
    return tuple(field for _, field, _, _ in Formatter().parse(template) if field)


def required(name: str, validate: Optional[Validator] = None, reason: str = "invalid value") -> QueryParam:
    return QueryParam(name, required=True, validate=validate, reason=reason)


def optional(name: str, validate: Optional[Validator] = None, reason: str = "invalid value") -> QueryParam:
    return QueryParam(name, required=False, validate=validate, reason=reason)


def endpoint(name: str, path_template: str, *params: QueryParam, paginated: bool = False) -> EndpointSpec:
    """Create an EndpointSpec, reading path params from the template.

    Params named after a placeholder validate that path segment; the rest are
    query params.
    """
    path_params = _placeholders(path_template)
    return EndpointSpec(
        name=name,
        path_template=path_template,
        path_params=path_params,
        query_params=tuple(p for p in params if p.name not in path_params),
        paginated=paginated,
        path_rules=tuple(p for p in params if p.name in path_params),
    )

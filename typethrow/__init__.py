'''Runtime type assertions with descriptive error messages'''
from .check import (
    as_checker,
    default_checker,
    get_checker,
    matches_by_name,
    matches_by_name_or_instance,
    MatchPolicy,
    type_matches,
    type_matches_any,
)
from .error import (
    InvalidTypeReferenceError,
    MissingContextError,
    TypeMismatchError,
)
from .message import (
    DiagnosticContext,
    format_diagnostic_message,
    multi_types_to_string,
)
from .thrower import (
    build_multi_type_thrower,
    build_multi_type_thrower_curried,
    build_single_type_thrower,
    build_single_type_thrower_curried,
    build_type_first_thrower,
    context_type_thrower,
    context_types_thrower,
    ensure_type,
    ensure_types,
    error_if_not_type,
    error_if_not_types,
    error_unless_type,
    ThrowerConfig,
)
from .typeref import (
    as_type_ref,
    ByName,
    ByType,
    is_checkable_type_reference,
    resolve_type_name,
    TypeRef,
)

__version__ = '0.1'

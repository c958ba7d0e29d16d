from .builder import FilterBuilder
from .context import AttributeContext, RuntimeContext
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    FieldNotFoundError,
    InvalidPathError,
    OperatorArityError,
    OperatorNotFoundError,
    PredicateError,
    RelationshipTraversalError,
    UnsupportedNegationError,
)
from .expression import (
    AndFilterExpression,
    FilterExpression,
    NotFilterExpression,
    OrFilterExpression,
    Visitor,
)
from .metadata import EntityDictionary, MappingEntityDictionary, RelationshipType
from .operators import Arity, BooleanTest, Operator
from .operators_memory import build_default_registry
from .path import PathStep, TraversalPath
from .predicate import FilterPredicate
from .visitors import (
    InMemoryFilterVisitor,
    NegationNormalizationVisitor,
    PredicateExtractionVisitor,
    extract_predicates,
    normalize,
)

__all__ = [
    # Core types
    "Operator",
    "Arity",
    "BooleanTest",
    "PathStep",
    "TraversalPath",
    "RelationshipType",
    "FilterPredicate",
    # Expression tree
    "FilterExpression",
    "AndFilterExpression",
    "OrFilterExpression",
    "NotFilterExpression",
    "Visitor",
    # Visitors
    "InMemoryFilterVisitor",
    "NegationNormalizationVisitor",
    "PredicateExtractionVisitor",
    "normalize",
    "extract_predicates",
    # Builder
    "FilterBuilder",
    # Metadata / context
    "EntityDictionary",
    "MappingEntityDictionary",
    "RuntimeContext",
    "AttributeContext",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "PredicateError",
    "InvalidPathError",
    "OperatorArityError",
    "UnsupportedNegationError",
    "OperatorNotFoundError",
    "FieldNotFoundError",
    "RelationshipTraversalError",
]

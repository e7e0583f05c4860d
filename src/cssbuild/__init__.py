"""cssbuild: a validating CSS selector builder."""

__version__ = "0.1.0"

from cssbuild.config import BuilderConfig  # noqa: E402
from cssbuild.selector import (  # noqa: E402
    BuilderFacade,
    Combination,
    DuplicateFragmentError,
    FragmentKind,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "BuilderConfig",
    "BuilderFacade",
    "Combination",
    "DuplicateFragmentError",
    "FragmentKind",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
]

from cssbuild.selector.builder import SelectorBuilder
from cssbuild.selector.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from cssbuild.selector.facade import BuilderFacade, css_selector_builder
from cssbuild.selector.model import Combination, FragmentKind

__all__ = [
    "SelectorBuilder",
    "BuilderFacade",
    "css_selector_builder",
    "Combination",
    "FragmentKind",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
]

"""Link reference classification, resolution and dispatch."""

from .AnchorDirectories import AnchorDirectories
from .BufferHistory import BufferHistory
from .classify_reference import classify_reference
from .Dispatcher import Dispatcher
from .DispatchResult import DispatchResult
from .has_url import has_url
from .LinkContext import LinkContext
from .MappingCitationLookup import MappingCitationLookup
from .MarkdownHeadingSearch import MarkdownHeadingSearch
from .Opener import Opener
from .path_exists import path_exists
from .PathResolver import PathResolver
from .ReferenceKind import ReferenceKind
from .ResolutionPolicy import RelativeTo, ResolutionPolicy

__all__ = [
    "AnchorDirectories",
    "BufferHistory",
    "DispatchResult",
    "Dispatcher",
    "LinkContext",
    "MappingCitationLookup",
    "MarkdownHeadingSearch",
    "Opener",
    "PathResolver",
    "ReferenceKind",
    "RelativeTo",
    "ResolutionPolicy",
    "classify_reference",
    "has_url",
    "path_exists",
]

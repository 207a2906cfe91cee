"""Concrete read-only item model for catalogs loaded from files.

Hosts with their own object model do not need this module; anything with the
accessors in :mod:`jobfilter.core.protocols` can be filtered. The command line
tool uses it to evaluate filters against a YAML or JSON description of a
folder tree.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.errors import CatalogError, CodecError
from .core.log import get_logger
from .utils.codec import read_document

logger = get_logger(__name__)

FULL_NAME_SEPARATOR = "/"
FULL_DISPLAY_NAME_SEPARATOR = " » "


class RootGroup:
    """The virtual top of the tree. It is a group but not an item: no name."""

    def __init__(self, display_name: str = "All") -> None:
        self._display_name = display_name
        self.items: List["CatalogItem"] = []

    @property
    def full_name(self) -> str:
        return ""

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def full_display_name(self) -> str:
        return ""


class CatalogItem(ABC):
    """Shared naming logic for folders and jobs."""

    def __init__(
        self,
        name: str,
        parent: Union[RootGroup, "Folder", None] = None,
        display_name: Optional[str] = None,
    ) -> None:
        self._name = name
        self._display_name = display_name
        self._parent = parent

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Union[RootGroup, "Folder", None]:
        return self._parent

    @property
    def display_name(self) -> str:
        return self._display_name or self._name

    @property
    def full_name(self) -> str:
        prefix = self._parent.full_name if self._parent is not None else ""
        return f"{prefix}{FULL_NAME_SEPARATOR}{self._name}" if prefix else self._name

    @property
    def full_display_name(self) -> str:
        prefix = self._parent.full_display_name if self._parent is not None else ""
        if prefix:
            return f"{prefix}{FULL_DISPLAY_NAME_SEPARATOR}{self.display_name}"
        return self.display_name

    @property
    @abstractmethod
    def all_jobs(self) -> List["Job"]:
        """Jobs held by this item."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r})"


class Build:
    """One run of a job."""

    def __init__(
        self,
        job: "Job",
        number: int,
        display_name: Optional[str] = None,
        full_display_name: Optional[str] = None,
    ) -> None:
        self.job = job
        self.number = number
        self._display_name = display_name
        self._full_display_name = full_display_name

    @property
    def display_name(self) -> str:
        return self._display_name or f"#{self.number}"

    @property
    def full_display_name(self) -> str:
        if self._full_display_name:
            return self._full_display_name
        return f"{self.job.full_display_name} {self.display_name}"


class Job(CatalogItem):
    """A buildable item. Its only job is itself."""

    def __init__(self, name: str, parent=None, display_name: Optional[str] = None) -> None:
        super().__init__(name, parent, display_name)
        self.builds: List[Build] = []

    def add_build(
        self,
        number: int,
        display_name: Optional[str] = None,
        full_display_name: Optional[str] = None,
    ) -> Build:
        build = Build(self, number, display_name, full_display_name)
        self.builds.append(build)
        return build

    @property
    def all_jobs(self) -> List["Job"]:
        return [self]


class Folder(CatalogItem):
    """A container of folders and jobs."""

    def __init__(self, name: str, parent=None, display_name: Optional[str] = None) -> None:
        super().__init__(name, parent, display_name)
        self.items: List[CatalogItem] = []

    @property
    def all_jobs(self) -> List[Job]:
        jobs: List[Job] = []
        for child in self.items:
            jobs.extend(child.all_jobs)
        return jobs


class BuildEntry(BaseModel):
    """Build entry of a catalog document."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    number: int
    display_name: Optional[str] = Field(None, alias="displayName")
    full_display_name: Optional[str] = Field(None, alias="fullDisplayName")


class NodeEntry(BaseModel):
    """Folder or job entry of a catalog document."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    type: Literal["folder", "job"] = "job"
    name: str = Field(min_length=1)
    display_name: Optional[str] = Field(None, alias="displayName")
    builds: List[BuildEntry] = Field(default_factory=list)
    items: List["NodeEntry"] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    """Top level of a catalog document."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    display_name: str = Field("All", alias="displayName")
    items: List[NodeEntry] = Field(default_factory=list)


class Catalog:
    """A loaded item tree."""

    def __init__(self, root: RootGroup) -> None:
        self.root = root

    @property
    def top_level_items(self) -> List[CatalogItem]:
        return list(self.root.items)

    def all_items(self) -> List[CatalogItem]:
        """Every folder and job, depth first, parents before children."""
        return list(_walk(self.root.items))

    def find(self, full_name: str) -> Optional[CatalogItem]:
        """Look up an item by its full name."""
        for item in _walk(self.root.items):
            if item.full_name == full_name:
                return item
        return None


def _walk(items: List[CatalogItem]) -> Iterator[CatalogItem]:
    for item in items:
        yield item
        if isinstance(item, Folder):
            yield from _walk(item.items)


def _build_node(entry: NodeEntry, parent: Union[RootGroup, Folder]) -> CatalogItem:
    if entry.type == "folder":
        if entry.builds:
            raise CatalogError(f"Folder {entry.name!r} cannot have builds")
        folder = Folder(entry.name, parent, entry.display_name)
        folder.items = [_build_node(child, folder) for child in entry.items]
        return folder

    if entry.items:
        raise CatalogError(f"Job {entry.name!r} cannot contain items")
    job = Job(entry.name, parent, entry.display_name)
    for build in entry.builds:
        job.add_build(build.number, build.display_name, build.full_display_name)
    return job


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    """Build a catalog from a parsed document."""
    if not isinstance(data, dict):
        raise CatalogError("Catalog document must be a mapping")
    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog: {e}") from e

    root = RootGroup(document.display_name)
    root.items = [_build_node(node, root) for node in document.items]
    return Catalog(root)


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a YAML or JSON file."""
    try:
        data = read_document(path)
    except CodecError as e:
        raise CatalogError(f"Failed to load catalog {path}: {e.message}") from e
    catalog = catalog_from_dict(data)
    logger.debug("Loaded catalog %s with %s items", path, len(catalog.all_items()))
    return catalog

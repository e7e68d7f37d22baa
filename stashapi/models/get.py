"""Models decoded from API responses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_Reader = Callable[[Any, str], Any]


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _field(data: Any, key: str, read: _Reader) -> Any:
    mapping = _mapping(data)
    if key not in mapping:
        raise ValueError(f"missing field `{key}`")
    return read(mapping[key], key)


def _optional(data: Any, key: str, read: _Reader) -> Any:
    value = _mapping(data).get(key)
    return None if value is None else read(value, key)


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _boolean(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}` must be a boolean")
    return value


def _unsigned(bits: int) -> _Reader:
    def read(value: Any, key: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 1 << bits:
            raise ValueError(f"field `{key}` must be an unsigned {bits}-bit integer")
        return value

    return read


_u32 = _unsigned(32)
_u64 = _unsigned(64)


def _model(parse: Callable[[Any], T]) -> _Reader:
    return lambda value, key: parse(value)


def _list_of(parse: Callable[[Any], T]) -> _Reader:
    def read(value: Any, key: str) -> list[T]:
        if not isinstance(value, list):
            raise ValueError(f"field `{key}` must be a list")
        return [parse(item) for item in value]

    return read


@dataclass(frozen=True)
class BitbucketError:
    """A single error reported by the server."""

    message: str
    context: str | None = None
    exception_name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> BitbucketError:
        return cls(
            message=_field(data, "message", _string),
            context=_optional(data, "context", _string),
            exception_name=_optional(data, "exceptionName", _string),
        )

    def __str__(self) -> str:
        return self.message


@dataclass
class BitbucketErrors(Exception):
    """The list of errors the server sent back for a failed request."""

    errors: list[BitbucketError] = field(default_factory=list)

    __hash__ = Exception.__hash__

    @classmethod
    def from_dict(cls, data: Any) -> BitbucketErrors:
        return cls(errors=_field(data, "errors", _list_of(BitbucketError.from_dict)))

    def __str__(self) -> str:
        lines = "".join(f"    {number}. {error}\n" for number, error in enumerate(self.errors, 1))
        return f"The following errors where encountered:\n{lines}"


@dataclass(frozen=True)
class Link:
    url: str
    rel: str

    @classmethod
    def from_dict(cls, data: Any) -> Link:
        return cls(url=_field(data, "url", _string), rel=_field(data, "rel", _string))


@dataclass(frozen=True)
class LinkPart:
    href: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> LinkPart:
        return cls(href=_field(data, "href", _string))


@dataclass(frozen=True)
class Links:
    parts: list[LinkPart] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Links:
        return cls(parts=_field(data, "self", _list_of(LinkPart.from_dict)))


@dataclass(frozen=True)
class PagedResponse(Generic[T]):
    """One page of a paginated listing."""

    size: int
    limit: int
    is_last_page: bool
    values: list[T]
    start: int
    next_page_start: int | None = None
    filter: int = 0

    @classmethod
    def from_dict(cls, data: Any, parse_item: Callable[[Any], T]) -> PagedResponse[T]:
        return cls(
            size=_field(data, "size", _u32),
            limit=_field(data, "limit", _u32),
            is_last_page=_field(data, "isLastPage", _boolean),
            values=_field(data, "values", _list_of(parse_item)),
            start=_field(data, "start", _u32),
            next_page_start=_optional(data, "nextPageStart", _u32),
        )


@dataclass(frozen=True)
class Project:
    key: str
    id: int
    name: str
    public: bool
    type: str
    links: Links
    description: str | None = None
    link: Link | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Project:
        return cls(
            key=_field(data, "key", _string),
            id=_field(data, "id", _u32),
            name=_field(data, "name", _string),
            public=_field(data, "public", _boolean),
            type=_field(data, "type", _string),
            links=_field(data, "links", _model(Links.from_dict)),
            description=_optional(data, "description", _string),
            link=_optional(data, "link", _model(Link.from_dict)),
        )


@dataclass(frozen=True)
class RepositoryCloneLinkPart:
    href: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> RepositoryCloneLinkPart:
        return cls(href=_field(data, "href", _string), name=_field(data, "name", _string))


@dataclass(frozen=True)
class RepositoryLinks:
    clone: list[RepositoryCloneLinkPart]
    links: list[LinkPart]

    @classmethod
    def from_dict(cls, data: Any) -> RepositoryLinks:
        return cls(
            clone=_field(data, "clone", _list_of(RepositoryCloneLinkPart.from_dict)),
            links=_field(data, "self", _list_of(LinkPart.from_dict)),
        )


@dataclass(frozen=True)
class Repository:
    slug: str
    id: int
    name: str
    scm: str
    state: str
    status: str
    forkable: bool
    project: Project
    public: bool
    links: RepositoryLinks
    clone_url: str | None = None
    link: Link | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Repository:
        return cls(
            slug=_field(data, "slug", _string),
            id=_field(data, "id", _u32),
            name=_field(data, "name", _string),
            scm=_field(data, "scmId", _string),
            state=_field(data, "state", _string),
            status=_field(data, "statusMessage", _string),
            forkable=_field(data, "forkable", _boolean),
            project=_field(data, "project", _model(Project.from_dict)),
            public=_field(data, "public", _boolean),
            links=_field(data, "links", _model(RepositoryLinks.from_dict)),
            clone_url=_optional(data, "cloneUrl", _string),
            link=_optional(data, "link", _model(Link.from_dict)),
        )


@dataclass(frozen=True)
class Branch:
    id: str
    display_id: str
    latest_changeset: str
    latest_commit: str
    is_default: bool

    @classmethod
    def from_dict(cls, data: Any) -> Branch:
        return cls(
            id=_field(data, "id", _string),
            display_id=_field(data, "displayId", _string),
            latest_changeset=_field(data, "latestChangeset", _string),
            latest_commit=_field(data, "latestCommit", _string),
            is_default=_field(data, "isDefault", _boolean),
        )


@dataclass(frozen=True)
class Author:
    name: str
    email: str

    @classmethod
    def from_dict(cls, data: Any) -> Author:
        return cls(name=_field(data, "name", _string), email=_field(data, "emailAddress", _string))


@dataclass(frozen=True)
class ParentCommit:
    id: str
    display_id: str

    @classmethod
    def from_dict(cls, data: Any) -> ParentCommit:
        return cls(id=_field(data, "id", _string), display_id=_field(data, "displayId", _string))


@dataclass(frozen=True)
class Commit:
    id: str
    display_id: str
    author: Author
    author_timestamp: int
    message: str
    parents: list[ParentCommit]

    @classmethod
    def from_dict(cls, data: Any) -> Commit:
        return cls(
            id=_field(data, "id", _string),
            display_id=_field(data, "displayId", _string),
            author=_field(data, "author", _model(Author.from_dict)),
            author_timestamp=_field(data, "authorTimestamp", _u64),
            message=_field(data, "message", _string),
            parents=_field(data, "parents", _list_of(ParentCommit.from_dict)),
        )


@dataclass(frozen=True)
class User:
    name: str
    email: str
    id: int
    display_name: str
    active: bool
    slug: str
    type: str

    @classmethod
    def from_dict(cls, data: Any) -> User:
        return cls(
            name=_field(data, "name", _string),
            email=_field(data, "emailAddress", _string),
            id=_field(data, "id", _u64),
            display_name=_field(data, "displayName", _string),
            active=_field(data, "active", _boolean),
            slug=_field(data, "slug", _string),
            type=_field(data, "type", _string),
        )


@dataclass(frozen=True)
class PullRequestRefRepoProject:
    key: str

    @classmethod
    def from_dict(cls, data: Any) -> PullRequestRefRepoProject:
        return cls(key=_field(data, "key", _string))


@dataclass(frozen=True)
class PullRequestRefRepo:
    slug: str
    project: PullRequestRefRepoProject
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PullRequestRefRepo:
        return cls(
            slug=_field(data, "slug", _string),
            project=_field(data, "project", _model(PullRequestRefRepoProject.from_dict)),
            name=_optional(data, "name", _string),
        )


@dataclass(frozen=True)
class PullRequestRef:
    id: str
    repository: PullRequestRefRepo

    @classmethod
    def from_dict(cls, data: Any) -> PullRequestRef:
        return cls(
            id=_field(data, "id", _string),
            repository=_field(data, "repository", _model(PullRequestRefRepo.from_dict)),
        )


@dataclass(frozen=True)
class PullRequestMember:
    user: User
    role: str
    approved: bool

    @classmethod
    def from_dict(cls, data: Any) -> PullRequestMember:
        return cls(
            user=_field(data, "user", _model(User.from_dict)),
            role=_field(data, "role", _string),
            approved=_field(data, "approved", _boolean),
        )


@dataclass(frozen=True)
class PullRequest:
    id: int
    version: int
    title: str
    date_created: int
    date_updated: int
    from_ref: PullRequestRef
    to_ref: PullRequestRef
    reviewers: list[PullRequestMember]
    participants: list[PullRequestMember]
    links: Links
    description: str | None = None
    state: str | None = None
    open: bool | None = None
    closed: bool | None = None
    locked: bool | None = None
    author: PullRequestMember | None = None
    link: Link | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PullRequest:
        members = _list_of(PullRequestMember.from_dict)
        return cls(
            id=_field(data, "id", _u64),
            version=_field(data, "version", _u32),
            title=_field(data, "title", _string),
            date_created=_field(data, "createdDate", _u64),
            date_updated=_field(data, "updatedDate", _u64),
            from_ref=_field(data, "fromRef", _model(PullRequestRef.from_dict)),
            to_ref=_field(data, "toRef", _model(PullRequestRef.from_dict)),
            reviewers=_field(data, "reviewers", members),
            participants=_field(data, "participants", members),
            links=_field(data, "links", _model(Links.from_dict)),
            description=_optional(data, "description", _string),
            state=_optional(data, "state", _string),
            open=_optional(data, "open", _boolean),
            closed=_optional(data, "closed", _boolean),
            locked=_optional(data, "locked", _boolean),
            author=_optional(data, "author", _model(PullRequestMember.from_dict)),
            link=_optional(data, "link", _model(Link.from_dict)),
        )


@dataclass(frozen=True)
class Tag:
    id: str
    display_id: str
    latest_changeset: str
    latest_commit: str
    hash: str

    @classmethod
    def from_dict(cls, data: Any) -> Tag:
        return cls(
            id=_field(data, "id", _string),
            display_id=_field(data, "displayId", _string),
            latest_changeset=_field(data, "latestChangeset", _string),
            latest_commit=_field(data, "latestCommit", _string),
            hash=_field(data, "hash", _string),
        )


@dataclass(frozen=True)
class ApplicationProperties:
    version: str
    build_number: str
    build_date: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> ApplicationProperties:
        return cls(
            version=_field(data, "version", _string),
            build_number=_field(data, "buildNumber", _string),
            build_date=_field(data, "buildDate", _string),
            name=_field(data, "displayName", _string),
        )


class PullRequestState(Enum):
    """Filter for listing pull requests by state."""

    ALL = "ALL"
    OPEN = "OPEN"
    MERGED = "MERGED"
    DECLINED = "DECLINED"
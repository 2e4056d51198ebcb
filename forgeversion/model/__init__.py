from enum import Enum
from typing import Optional

import pydantic
from pydantic import Field, field_validator


class ForgeType(str, Enum):
    FORGE = "forge"
    NEOFORGE = "neoforge"


class Channel(str, Enum):
    LATEST = "latest"
    RECOMMENDED = "recommended"


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PARSE = "parse"
    LOOKUP_MISS = "lookup_miss"
    UNEXPECTED = "unexpected"


class ResolveError(Exception):
    kind = ErrorKind.UNEXPECTED


class InputError(ResolveError):
    kind = ErrorKind.CONFIGURATION


class TransportError(ResolveError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, status: int, url: str):
        super(TransportError, self).__init__("HTTP error! status: %d" % status)
        self.status = status
        self.url = url


class MetadataParseError(ResolveError):
    kind = ErrorKind.PARSE


class VersionNotFoundError(ResolveError):
    kind = ErrorKind.LOOKUP_MISS

    def __init__(self, key: str):
        super(VersionNotFoundError, self).__init__("Forge version '%s' not found." % key)
        self.key = key


class MetaBase(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(populate_by_name=True)


class Settings(MetaBase):
    """
    Inputs of one invocation. forge_type is left unchecked here, the orchestrator reports unknown
    values itself.
    """

    model_config = pydantic.ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("mc_version")
    def mc_version_must_not_be_empty(cls, v):
        v = v.strip()
        assert v, "minecraft-version must not be empty"
        return v

    @field_validator("channel")
    def channel_must_be_known(cls, v):
        assert v in [c.value for c in Channel], "Invalid channel '%s'" % v
        return v

    mc_version: str = Field(alias="minecraft-version")
    forge_type: str = Field(ForgeType.NEOFORGE.value, alias="forge-type")
    channel: str = Channel.LATEST.value
    latest: bool = True


class Failure(MetaBase):
    kind: ErrorKind
    message: str


class Resolution(MetaBase):
    version: Optional[str] = None
    failure: Optional[Failure] = None

    @property
    def is_ok(self):
        return self.failure is None

    @classmethod
    def success(cls, version: Optional[str]):
        return cls(version=version)

    @classmethod
    def error(cls, kind: ErrorKind, message: str):
        return cls(failure=Failure(kind=kind, message=message))

    @classmethod
    def from_exception(cls, e: Exception, fallback_message: str):
        kind = e.kind if isinstance(e, ResolveError) else ErrorKind.UNEXPECTED
        return cls.error(kind, str(e) or fallback_message)

"""Configuration models for profiles, clusters and the resolved view."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROFILES_KEY = "ecs_profiles"
CLUSTERS_KEY = "clusters"

COMPOSE_PROJECT_NAME_PREFIX_DEFAULT = "ecscompose-"
COMPOSE_SERVICE_NAME_PREFIX_DEFAULT = COMPOSE_PROJECT_NAME_PREFIX_DEFAULT + "service-"
CFN_STACK_NAME_PREFIX_DEFAULT = "amazon-ecs-cli-setup-"


class ConfigSource(str, Enum):
    """Where a resolved configuration came from."""

    LEGACY = "legacy"
    CURRENT = "current"
    MISSING = "missing"


class ProfileEntry(BaseModel):
    """Credentials stored under one name in the profile document."""

    model_config = ConfigDict(extra="allow")

    aws_access_key_id: str
    aws_secret_access_key: str = Field(repr=False)


class ClusterEntry(BaseModel):
    """Cluster and region stored under one name in the cluster document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    cluster: str
    region: str
    compose_project_name_prefix: str | None = Field(
        default=None, alias="compose-project-name-prefix"
    )
    compose_service_name_prefix: str | None = Field(
        default=None, alias="compose-service-name-prefix"
    )
    cfn_stack_name_prefix: str | None = Field(default=None, alias="cfn-stack-name-prefix")

    def to_document(self) -> dict[str, object]:
        """Return the entry as it is stored in the cluster document."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProfileConfiguration(BaseModel):
    """A named profile to save."""

    name: str = Field(min_length=1)
    entry: ProfileEntry


class ClusterConfiguration(BaseModel):
    """A named cluster configuration to save."""

    name: str = Field(min_length=1)
    entry: ClusterEntry


class ResolvedConfig(BaseModel):
    """Merged profile and cluster configuration used to talk to ECS."""

    model_config = ConfigDict(frozen=True)

    source: ConfigSource
    cluster: str
    region: str | None = None
    aws_profile: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = Field(default=None, repr=False)
    compose_project_name_prefix: str | None = None
    compose_service_name_prefix: str | None = None
    cfn_stack_name_prefix: str | None = None

    @property
    def effective_compose_project_name_prefix(self) -> str:
        if self.compose_project_name_prefix is None:
            return COMPOSE_PROJECT_NAME_PREFIX_DEFAULT
        return self.compose_project_name_prefix

    @property
    def effective_compose_service_name_prefix(self) -> str:
        if self.compose_service_name_prefix is None:
            return COMPOSE_SERVICE_NAME_PREFIX_DEFAULT
        return self.compose_service_name_prefix

    @property
    def effective_cfn_stack_name_prefix(self) -> str:
        if self.cfn_stack_name_prefix is None:
            return CFN_STACK_NAME_PREFIX_DEFAULT
        return self.cfn_stack_name_prefix


class ProfileDocument(BaseModel):
    """Contents of ``profile.yml``."""

    model_config = ConfigDict(extra="allow")

    default: str | None = None
    ecs_profiles: dict[str, ProfileEntry] = Field(default_factory=dict)

    @field_validator(PROFILES_KEY, mode="before")
    @classmethod
    def _null_is_empty(cls, value: object) -> object:
        return {} if value is None else value


class ClusterDocument(BaseModel):
    """Contents of ``config.yml``."""

    model_config = ConfigDict(extra="allow")

    default: str | None = None
    clusters: dict[str, ClusterEntry] = Field(default_factory=dict)

    @field_validator(CLUSTERS_KEY, mode="before")
    @classmethod
    def _null_is_empty(cls, value: object) -> object:
        return {} if value is None else value

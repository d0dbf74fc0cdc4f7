"""Resource types for the MultiClusterEngine custom resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

GROUP = "multicluster.openshift.io"
VERSION = "v1"
API_VERSION = f"{GROUP}/{VERSION}"
KIND = "MultiClusterEngine"


@dataclass(frozen=True)
class GroupVersionKind:
    """Identifies a resource kind within an API group and version."""

    group: str
    version: str
    kind: str

    def group_version(self) -> str:
        """Return the "group/version" string, or just the version for the core group."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


MULTICLUSTER_ENGINE_GVK = GroupVersionKind(GROUP, VERSION, KIND)


class AvailabilityType(str, Enum):
    BASIC = "Basic"
    HIGH = "High"


class DeploymentMode(str, Enum):
    HOSTED = "Hosted"
    STANDALONE = "Standalone"


class HubSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    XLARGE = "XLarge"


class PhaseType(str, Enum):
    PROGRESSING = "Progressing"
    PAUSED = "Paused"
    AVAILABLE = "Available"
    UNINSTALLING = "Uninstalling"
    ERROR = "Error"
    UNIMPLEMENTED = "Unimplemented"
    UPDATING = "Updating"


class MultiClusterEngineConditionType(str, Enum):
    AVAILABLE = "Available"
    PROGRESSING = "Progressing"
    COMPONENT_FAILURE = "ComponentFailure"
    FAILURE = "Failure"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


def _compact(pairs: dict[str, Any]) -> dict[str, Any]:
    """Drop empty values, as fields marked omitempty are left out."""
    return {k: v for k, v in pairs.items() if v not in ("", None, [], {})}


@dataclass
class EnvConfig:
    name: str = ""
    value: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _compact({"name": self.name, "value": self.value})

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> EnvConfig:
        return cls(name=data.get("name", ""), value=data.get("value", ""))


@dataclass
class ContainerConfig:
    name: str = ""
    env: list[EnvConfig] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "env": [e._to_dict() for e in self.env]}

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ContainerConfig:
        return cls(
            name=data.get("name", ""),
            env=[EnvConfig._from_dict(e) for e in data.get("env") or []],
        )


@dataclass
class DeploymentConfig:
    name: str = ""
    containers: list[ContainerConfig] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "containers": [c._to_dict() for c in self.containers]}

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> DeploymentConfig:
        return cls(
            name=data.get("name", ""),
            containers=[ContainerConfig._from_dict(c) for c in data.get("containers") or []],
        )


@dataclass
class ConfigOverride:
    deployments: list[DeploymentConfig] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return _compact({"deployments": [d._to_dict() for d in self.deployments]})

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ConfigOverride:
        return cls(
            deployments=[DeploymentConfig._from_dict(d) for d in data.get("deployments") or []]
        )


@dataclass
class ComponentConfig:
    name: str = ""
    enabled: bool = False
    config_overrides: ConfigOverride = field(default_factory=ConfigOverride)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "name": self.name,
            "configOverrides": self.config_overrides._to_dict(),
        }

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ComponentConfig:
        return cls(
            name=data.get("name", ""),
            enabled=bool(data.get("enabled", False)),
            config_overrides=ConfigOverride._from_dict(data.get("configOverrides") or {}),
        )


@dataclass
class Overrides:
    image_pull_policy: str = ""
    components: list[ComponentConfig] = field(default_factory=list)
    infrastructure_custom_namespace: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "imagePullPolicy": self.image_pull_policy,
                "components": [c._to_dict() for c in self.components],
                "infrastructureCustomNamespace": self.infrastructure_custom_namespace,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Overrides:
        return cls(
            image_pull_policy=data.get("imagePullPolicy", ""),
            components=[ComponentConfig._from_dict(c) for c in data.get("components") or []],
            infrastructure_custom_namespace=data.get("infrastructureCustomNamespace", ""),
        )


@dataclass
class MultiClusterEngineSpec:
    availability_config: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)
    image_pull_secret: str = ""
    overrides: Overrides | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    target_namespace: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "availabilityConfig": _text(self.availability_config),
                "nodeSelector": dict(self.node_selector),
                "imagePullSecret": self.image_pull_secret,
                "overrides": self.overrides._to_dict() if self.overrides is not None else None,
                "tolerations": [dict(t) for t in self.tolerations],
                "targetNamespace": self.target_namespace,
            }
        ) | ({"overrides": self.overrides._to_dict()} if self.overrides is not None else {})

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MultiClusterEngineSpec:
        raw_overrides = data.get("overrides")
        return cls(
            availability_config=data.get("availabilityConfig", ""),
            node_selector=dict(data.get("nodeSelector") or {}),
            image_pull_secret=data.get("imagePullSecret", ""),
            overrides=Overrides._from_dict(raw_overrides) if raw_overrides is not None else None,
            tolerations=[dict(t) for t in data.get("tolerations") or []],
            target_namespace=data.get("targetNamespace", ""),
        )


@dataclass
class ComponentCondition:
    name: str = ""
    kind: str = ""
    available: bool = False
    type: str = ""
    status: str = ""
    last_update_time: str = ""
    last_transition_time: str = ""
    reason: str = ""
    message: str = ""

    def _to_dict(self) -> dict[str, Any]:
        # "available" and "last_update_time" are kept in memory only.
        return _compact(
            {
                "name": self.name,
                "kind": self.kind,
                "type": self.type,
                "status": self.status,
                "lastTransitionTime": self.last_transition_time,
                "reason": self.reason,
                "message": self.message,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ComponentCondition:
        return cls(
            name=data.get("name", ""),
            kind=data.get("kind", ""),
            type=data.get("type", ""),
            status=data.get("status", ""),
            last_transition_time=data.get("lastTransitionTime") or "",
            reason=data.get("reason", ""),
            message=data.get("message", ""),
        )


@dataclass
class MultiClusterEngineCondition:
    type: str = ""
    status: str = ""
    last_update_time: str = ""
    last_transition_time: str = ""
    reason: str = ""
    message: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "type": _text(self.type),
                "status": self.status,
                "lastUpdateTime": self.last_update_time,
                "lastTransitionTime": self.last_transition_time,
                "reason": self.reason,
                "message": self.message,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MultiClusterEngineCondition:
        return cls(
            type=data.get("type", ""),
            status=data.get("status", ""),
            last_update_time=data.get("lastUpdateTime") or "",
            last_transition_time=data.get("lastTransitionTime") or "",
            reason=data.get("reason", ""),
            message=data.get("message", ""),
        )


@dataclass
class MultiClusterEngineStatus:
    phase: str = ""
    components: list[ComponentCondition] = field(default_factory=list)
    conditions: list[MultiClusterEngineCondition] = field(default_factory=list)
    current_version: str = ""
    desired_version: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "phase": _text(self.phase),
                "components": [c._to_dict() for c in self.components],
                "conditions": [c._to_dict() for c in self.conditions],
                "currentVersion": self.current_version,
                "desiredVersion": self.desired_version,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MultiClusterEngineStatus:
        return cls(
            phase=data.get("phase", ""),
            components=[ComponentCondition._from_dict(c) for c in data.get("components") or []],
            conditions=[
                MultiClusterEngineCondition._from_dict(c) for c in data.get("conditions") or []
            ],
            current_version=data.get("currentVersion", ""),
            desired_version=data.get("desiredVersion", ""),
        )


@dataclass
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "namespace": self.namespace,
                "labels": dict(self.labels),
                "annotations": dict(self.annotations),
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> ObjectMeta:
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
        )


@dataclass
class MultiClusterEngine:
    """A MultiClusterEngine resource: metadata, desired spec and observed status."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: MultiClusterEngineSpec = field(default_factory=MultiClusterEngineSpec)
    status: MultiClusterEngineStatus = field(default_factory=MultiClusterEngineStatus)
    api_version: str = API_VERSION
    kind: str = KIND

    @property
    def name(self) -> str:
        return self.metadata.name

    def _components(self) -> list[ComponentConfig]:
        return self.spec.overrides.components if self.spec.overrides is not None else []

    def component_present(self, name: str) -> bool:
        """Return True if the component appears in the overrides."""
        return any(c.name == name for c in self._components())

    def enabled(self, name: str) -> bool:
        """Return the enabled flag of the first matching component, False if absent."""
        return next((c.enabled for c in self._components() if c.name == name), False)

    def _set_enabled(self, name: str, value: bool) -> None:
        if self.spec.overrides is None:
            self.spec.overrides = Overrides()
        for component in self.spec.overrides.components:
            if component.name == name:
                component.enabled = value
                return
        self.spec.overrides.components.append(ComponentConfig(name=name, enabled=value))

    def enable(self, name: str) -> None:
        """Mark a component enabled, adding it to the overrides if needed."""
        self._set_enabled(name, True)

    def disable(self, name: str) -> None:
        """Mark a component disabled, adding it to the overrides if needed."""
        self._set_enabled(name, False)

    def prune(self, name: str) -> bool:
        """Remove every entry for a component; return True if any was removed."""
        if self.spec.overrides is None:
            return False
        kept = [c for c in self.spec.overrides.components if c.name != name]
        if len(kept) == len(self.spec.overrides.components):
            return False
        self.spec.overrides.components = kept
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the resource in its JSON form."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata._to_dict(),
            "spec": self.spec._to_dict(),
            "status": self.status._to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultiClusterEngine:
        """Build a resource from its JSON form."""
        return cls(
            metadata=ObjectMeta._from_dict(data.get("metadata") or {}),
            spec=MultiClusterEngineSpec._from_dict(data.get("spec") or {}),
            status=MultiClusterEngineStatus._from_dict(data.get("status") or {}),
            api_version=data.get("apiVersion") or API_VERSION,
            kind=data.get("kind") or KIND,
        )


@dataclass
class MultiClusterEngineList:
    items: list[MultiClusterEngine] = field(default_factory=list)


def is_in_hosted_mode(mce: MultiClusterEngine) -> bool:
    """Return True if the resource is annotated for hosted deployment."""
    return mce.metadata.annotations.get("deploymentmode") == DeploymentMode.HOSTED.value
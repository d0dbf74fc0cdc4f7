import pytest

from mceoperator.components import DISCOVERY
from mceoperator.types import (
    API_VERSION,
    ComponentConfig,
    ConfigOverride,
    ContainerConfig,
    DeploymentConfig,
    DeploymentMode,
    EnvConfig,
    GroupVersionKind,
    MultiClusterEngine,
    MultiClusterEngineCondition,
    MultiClusterEngineSpec,
    MultiClusterEngineStatus,
    ObjectMeta,
    Overrides,
    PhaseType,
    is_in_hosted_mode,
)


def make_mce(*configs):
    mce = MultiClusterEngine()
    if configs:
        mce.spec.overrides = Overrides(components=list(configs))
    return mce


def test_empty_spec_component_present():
    mce = make_mce()
    assert mce.component_present(DISCOVERY) is False
    assert mce.component_present("test") is False


def test_empty_spec_enabled():
    assert make_mce().enabled(DISCOVERY) is False


def test_enable_component():
    mce = make_mce()
    assert mce.component_present(DISCOVERY) is False
    assert mce.enabled(DISCOVERY) is False
    mce.enable(DISCOVERY)
    assert mce.component_present(DISCOVERY) is True
    assert mce.enabled(DISCOVERY) is True


def test_disable_component():
    mce = make_mce()
    mce.disable(DISCOVERY)
    assert mce.component_present(DISCOVERY) is True
    assert mce.enabled(DISCOVERY) is False


def test_prune_component():
    mce = make_mce(ComponentConfig(name=DISCOVERY, enabled=True))
    assert mce.prune(DISCOVERY) is True
    assert mce.prune("test") is False
    assert mce.component_present(DISCOVERY) is False


def test_prune_without_overrides():
    assert make_mce().prune(DISCOVERY) is False


def test_enable_existing_does_not_duplicate():
    mce = make_mce(ComponentConfig(name=DISCOVERY, enabled=False))
    mce.enable(DISCOVERY)
    mce.disable(DISCOVERY)
    mce.enable(DISCOVERY)
    assert [c.name for c in mce.spec.overrides.components] == [DISCOVERY]
    assert mce.enabled(DISCOVERY) is True


def test_hosted_mode():
    hosted = MultiClusterEngine(
        metadata=ObjectMeta(name="hosted-mce", annotations={"deploymentmode": "Hosted"})
    )
    assert is_in_hosted_mode(hosted) is True
    assert is_in_hosted_mode(MultiClusterEngine()) is False
    standalone = MultiClusterEngine(
        metadata=ObjectMeta(annotations={"deploymentmode": DeploymentMode.STANDALONE.value})
    )
    assert is_in_hosted_mode(standalone) is False


def test_group_version():
    assert GroupVersionKind("multicluster.openshift.io", "v1", "X").group_version() == API_VERSION
    assert GroupVersionKind("", "v1", "Pod").group_version() == "v1"


def test_default_to_dict():
    assert MultiClusterEngine().to_dict() == {
        "apiVersion": "multicluster.openshift.io/v1",
        "kind": "MultiClusterEngine",
        "metadata": {},
        "spec": {},
        "status": {},
    }


def test_component_config_serialized_fields():
    mce = make_mce()
    mce.enable(DISCOVERY)
    assert mce.to_dict()["spec"]["overrides"] == {
        "components": [{"enabled": True, "name": "discovery", "configOverrides": {}}]
    }


def test_round_trip():
    mce = MultiClusterEngine(
        metadata=ObjectMeta(name="multiclusterengine", annotations={"a": "b"}),
        spec=MultiClusterEngineSpec(
            availability_config="High",
            node_selector={"role": "infra"},
            target_namespace="multicluster-engine",
            tolerations=[{"key": "k", "operator": "Exists"}],
            overrides=Overrides(
                image_pull_policy="Always",
                infrastructure_custom_namespace="infra",
                components=[
                    ComponentConfig(
                        name="hive",
                        enabled=True,
                        config_overrides=ConfigOverride(
                            deployments=[
                                DeploymentConfig(
                                    name="hive-operator",
                                    containers=[
                                        ContainerConfig(
                                            name="c", env=[EnvConfig(name="X", value="1")]
                                        )
                                    ],
                                )
                            ]
                        ),
                    )
                ],
            ),
        ),
        status=MultiClusterEngineStatus(
            phase=PhaseType.AVAILABLE.value,
            conditions=[MultiClusterEngineCondition(type="Available", status="True")],
            current_version="2.6.0",
        ),
    )
    data = mce.to_dict()
    assert data["spec"]["availabilityConfig"] == "High"
    assert MultiClusterEngine.from_dict(data) == mce


@pytest.mark.parametrize("value", ["Basic", "low"])
def test_from_dict_keeps_availability_text(value):
    mce = MultiClusterEngine.from_dict({"spec": {"availabilityConfig": value}})
    assert mce.spec.availability_config == value
    assert mce.spec.overrides is None
# mceoperator

A Python model of the `MultiClusterEngine` custom resource
(`multicluster.openshift.io/v1`), with helpers for managing component
overrides and looking up legacy monitoring resources.

The package has two modules:

- `mceoperator.types`: dataclasses for the resource (`MultiClusterEngine`,
  `MultiClusterEngineList`, `ObjectMeta`, `MultiClusterEngineSpec`,
  `Overrides`, `ComponentConfig`, `ConfigOverride`, `DeploymentConfig`,
  `ContainerConfig`, `EnvConfig`, `MultiClusterEngineStatus`,
  `ComponentCondition`, `MultiClusterEngineCondition`), the enumerations
  `AvailabilityType`, `DeploymentMode`, `HubSize`, `PhaseType` and
  `MultiClusterEngineConditionType`, the `GroupVersionKind` value type and
  the function `is_in_hosted_mode`.
- `mceoperator.components`: the known component names (`ALL_COMPONENTS`,
  `MCE_COMPONENTS`), `is_valid_component`, and lookups for legacy
  monitoring resources.

It has no dependencies outside the standard library.

## Installation

```
pip install mceoperator
```

## Working with component overrides

```python
from mceoperator.types import MultiClusterEngine

mce = MultiClusterEngine()
mce.enable("discovery")
assert mce.component_present("discovery")
assert mce.enabled("discovery")

mce.disable("discovery")
assert mce.component_present("discovery")
assert not mce.enabled("discovery")

assert mce.prune("discovery") is True
assert mce.prune("discovery") is False
```

`enable` and `disable` create `spec.overrides` when it is missing and add
the component if it is not listed yet. `prune` removes every entry with the
given name and reports whether anything was removed.

## JSON form

```python
data = mce.to_dict()
same = MultiClusterEngine.from_dict(data)
```

`to_dict()` returns the camel-case shape used by the API server
(`apiVersion`, `kind`, `metadata`, `spec`, `status`), leaving out empty
optional fields. `from_dict` accepts the same shape.

## Deployment mode

```python
from mceoperator.types import MultiClusterEngine, ObjectMeta, is_in_hosted_mode

hosted = MultiClusterEngine(metadata=ObjectMeta(
    name="hosted-mce", annotations={"deploymentmode": "Hosted"}))
assert is_in_hosted_mode(hosted)
```

## Components and legacy monitoring resources

```python
from mceoperator.components import (
    is_valid_component,
    get_legacy_config_kind,
    get_legacy_prometheus_rules_name,
    get_legacy_service_monitor_name,
)

is_valid_component("hive")                          # True
get_legacy_config_kind()                            # ["PrometheusRule", "ServiceMonitor"]
get_legacy_prometheus_rules_name("console-mce")     # "acm-console-prometheus-rules"
get_legacy_service_monitor_name("cluster-lifecycle")  # "clusterlifecycle-state-metrics-v2"
```

An unknown component raises `KeyError`.

## What this package does not do

It models the resource only. It does not talk to a cluster, run an
admission webhook, apply defaults such as the target namespace, or validate
creation, update or deletion of `MultiClusterEngine` resources.

## Running the tests

```
pip install -e ".[test]"
pytest
```
"""Component names known to the multicluster engine and legacy resource lookups."""

from __future__ import annotations

ASSISTED_SERVICE = "assisted-service"
CLUSTER_LIFECYCLE = "cluster-lifecycle"
CLUSTER_MANAGER = "cluster-manager"
CLUSTER_PROXY_ADDON = "cluster-proxy-addon"
CONSOLE_MCE = "console-mce"
DISCOVERY = "discovery"
HIVE = "hive"
HYPERSHIFT = "hypershift"
HYPERSHIFT_LOCAL_HOSTING = "hypershift-local-hosting"
HYPERSHIFT_PREVIEW = "hypershift-preview"
IMAGE_BASED_INSTALL_OPERATOR = "image-based-install-operator"
IMAGE_BASED_INSTALL_OPERATOR_PREVIEW = "image-based-install-operator-preview"
LOCAL_CLUSTER = "local-cluster"
MANAGED_SERVICE_ACCOUNT = "managedserviceaccount"
MANAGED_SERVICE_ACCOUNT_PREVIEW = "managedserviceaccount-preview"
SERVER_FOUNDATION = "server-foundation"

ALL_COMPONENTS: tuple[str, ...] = (
    ASSISTED_SERVICE,
    CLUSTER_LIFECYCLE,
    CLUSTER_MANAGER,
    CLUSTER_PROXY_ADDON,
    CONSOLE_MCE,
    DISCOVERY,
    HIVE,
    HYPERSHIFT,
    HYPERSHIFT_LOCAL_HOSTING,
    HYPERSHIFT_PREVIEW,
    IMAGE_BASED_INSTALL_OPERATOR,
    IMAGE_BASED_INSTALL_OPERATOR_PREVIEW,
    LOCAL_CLUSTER,
    MANAGED_SERVICE_ACCOUNT,
    MANAGED_SERVICE_ACCOUNT_PREVIEW,
    SERVER_FOUNDATION,
)

# Components belonging to the engine proper (previews excluded).
MCE_COMPONENTS: tuple[str, ...] = (
    ASSISTED_SERVICE,
    CLUSTER_LIFECYCLE,
    CLUSTER_MANAGER,
    CLUSTER_PROXY_ADDON,
    CONSOLE_MCE,
    DISCOVERY,
    HIVE,
    HYPERSHIFT,
    HYPERSHIFT_LOCAL_HOSTING,
    IMAGE_BASED_INSTALL_OPERATOR,
    MANAGED_SERVICE_ACCOUNT,
    SERVER_FOUNDATION,
)

# Resource kinds that must be removed before upgrading to 2.4 and later.
LEGACY_CONFIG_KIND: tuple[str, ...] = ("PrometheusRule", "ServiceMonitor")

MCE_LEGACY_PROMETHEUS_RULES: dict[str, str] = {
    CONSOLE_MCE: "acm-console-prometheus-rules",
}

MCE_LEGACY_SERVICE_MONITORS: dict[str, str] = {
    CLUSTER_LIFECYCLE: "clusterlifecycle-state-metrics-v2",
    CONSOLE_MCE: "console-mce-monitor",
}


def is_valid_component(name: str) -> bool:
    """Return True if the name is one of the known components."""
    return name in ALL_COMPONENTS


def get_legacy_config_kind() -> list[str]:
    """Return the legacy resource kinds that must be removed before upgrading."""
    return list(LEGACY_CONFIG_KIND)


def get_legacy_prometheus_rules_name(component: str) -> str:
    """Return the legacy PrometheusRule name for a component; KeyError if unknown."""
    try:
        return MCE_LEGACY_PROMETHEUS_RULES[component]
    except KeyError:
        raise KeyError(
            f"failed to find PrometheusRules name for: {component} component"
        ) from None


def get_legacy_service_monitor_name(component: str) -> str:
    """Return the legacy ServiceMonitor name for a component; KeyError if unknown."""
    try:
        return MCE_LEGACY_SERVICE_MONITORS[component]
    except KeyError:
        raise KeyError(
            f"failed to find ServiceMonitors name for: {component} component"
        ) from None
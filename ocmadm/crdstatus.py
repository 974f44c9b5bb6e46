"""Status summaries of manifest works, CRDs and component deployments."""

from __future__ import annotations

import os
import sys
from typing import Any, Iterable, Mapping

from ocmadm.prefixwriter import LEVEL_2, PrefixWriter

_CRD_RESOURCE = "customresourcedefinitions"


def _red(text: str) -> str:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return text
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty and isatty():
        return f"\x1b[31m{text}\x1b[0m"
    return text


def _manifest_status(condition: Mapping[str, Any]) -> str:
    applied = next(
        (c for c in condition.get("conditions") or [] if c.get("type") == "Applied"),
        None,
    )
    if applied is None:
        return "unknown"
    if applied.get("status") == "True":
        return "applied"
    return _red("not-applied")


def work_details(key_prefix: str, work: Mapping[str, Any]) -> dict[str, str]:
    """Map "prefix.resource.[namespace/]name" to the applied state of each manifest."""
    manifests = (
        ((work.get("status") or {}).get("resourceStatus") or {}).get("manifests") or []
    )
    details: dict[str, str] = {}
    for cond in manifests:
        meta = cond.get("resourceMeta") or {}
        identifier = meta.get("name", "")
        if meta.get("namespace"):
            identifier = f"{meta['namespace']}/{identifier}"
        details[f"{key_prefix}.{meta.get('resource', '')}.{identifier}"] = _manifest_status(cond)
    return details


def format_crd_version(
    serving_versions: Mapping[str, Iterable[str]],
    storage_versions: Mapping[str, str],
    crd_name: str,
) -> str:
    """Join the served versions of a CRD with "|", marking the storage one with "*"."""
    storage = storage_versions.get(crd_name, "")
    marked = {f"*{v}" if v == storage else v for v in serving_versions.get(crd_name, [])}
    return "|".join(sorted(marked))


def print_crd(
    printer: PrefixWriter,
    crd_list: Iterable[Mapping[str, Any]],
    resources: Iterable[Mapping[str, Any]],
) -> None:
    """Write whether each CRD named in resources is installed, with its versions."""
    wanted = sorted({r.get("name", "") for r in resources if r.get("resource") == _CRD_RESOURCE})
    existing: set[str] = set()
    versions: dict[str, list[str]] = {}
    storage: dict[str, str] = {}
    for crd in crd_list:
        name = (crd.get("metadata") or {}).get("name", "")
        existing.add(name)
        versions[name] = list((crd.get("status") or {}).get("storedVersions") or [])
        serving: set[str] = set()
        for version in (crd.get("spec") or {}).get("versions") or []:
            if version.get("served"):
                serving.add(version.get("name", ""))
            if version.get("storage"):
                storage[name] = version.get("name", "")
            versions[name] = sorted(serving)
    for name in wanted:
        state = "installed" if name in existing else "absent"
        printer.write(LEVEL_2, "(%s) %s [%s]\n", state, name, format_crd_version(versions, storage, name))


def get_image_name(deploy: Mapping[str, Any]) -> str:
    """Return the image of the last container of a deployment, or "<none>"."""
    containers = (
        (((deploy.get("spec") or {}).get("template") or {}).get("spec") or {}).get("containers")
        or []
    )
    return containers[-1].get("image", "") if containers else "<none>"


def print_components_deploy(
    printer: PrefixWriter,
    deployments: Mapping[tuple[str, str], Mapping[str, Any]],
    resources: Iterable[Mapping[str, Any]],
    name: str,
) -> None:
    """Write the replica counts and image of the component deployment called name.

    deployments maps (namespace, name) to deployment objects; a missing
    deployment is skipped.
    """
    meta: Mapping[str, Any] = {}
    for item in resources:
        if item.get("name") == name:
            meta = item
    deploy = deployments.get((meta.get("namespace", ""), meta.get("name", "")))
    if deploy is None:
        return
    if name.endswith("agent"):
        label = "Agent:"
    elif name.endswith("controller"):
        label = "Controller:"
    elif name.endswith("webhook"):
        label = "Webhook:"
    else:
        label = ""
    replicas = int((deploy.get("spec") or {}).get("replicas") or 0)
    available = int((deploy.get("status") or {}).get("availableReplicas") or 0)
    printer.write(LEVEL_2, "%s\t(%d/%d) %s\n", label, replicas, available, get_image_name(deploy))
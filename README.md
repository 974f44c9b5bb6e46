# ocmadm

Building blocks for command-line tools that manage a multicluster hub and
the clusters joined to it. Everything here works on plain Python data
(dicts in the shape of Kubernetes objects, mappings, strings) and on text
streams. None of it talks to a cluster itself.

## Installation

```
pip install ocmadm
```

For running the tests:

```
pip install "ocmadm[test]"
pytest
```

## Modules

- `ocmadm.version`: `get()` returns a `VersionInfo` for the running build.
  `get_version_bundle(version)` returns the `VersionBundle` (image versions
  for `ocm`, `app_addon`, `policy_addon` and `multicluster_controlplane`) for
  `"0.15.0"`, `"v0.15.0"`, `"latest"` or `"default"`. A leading `v` is
  ignored, and an unknown version raises `ValueError`.
  `get_default_bundle_version()` returns `"0.15.0"`.
- `ocmadm.cmd`: `get_example_header()` returns `"oc cm"` when the program
  runs as `oc`, `"kubectl cm"` as `kubectl`, and the program name otherwise.
  `dry_run_message(dry_run)` prints a notice when `dry_run` is true.
- `ocmadm.randomstr`: `rand_string_az09(n)` returns `n` random characters
  from `a-z0-9`. A negative `n` raises `ValueError`.
- `ocmadm.trie`: `Trie`, keyed by dotted paths split by `default_segmenter`,
  with `get`, `put` (returns `True` for a new key), `iter` and `is_leaf`.
- `ocmadm.treeprinter`: `TreePrinter(name)` collects fields with
  `add_fields(name, fields)` and draws them as a box-drawing tree through
  `render()` or `print(out)`.
- `ocmadm.printoption`: `PrinterOption(kind, format="tree")` writes objects
  as a tree, a table or YAML. `validate()` raises `ValueError` for any other
  format. The tree and table output need a converter, set with
  `with_tree_converter` or `with_table_converter`. The table converter returns
  `(columns, rows)`. YAML output takes a list or a dict with an `items` list.
- `ocmadm.prefixwriter`: `PrefixWriter` writes at indentation levels
  (`LEVEL_0` to `LEVEL_4`, two spaces each). `Spinner` is a threaded terminal
  spinner that can also be used as a context manager, and it draws nothing
  when the output is not a terminal. `new_spinner` and
  `new_spinner_with_status` build spinners. `get_spinner_pod_status(pod)` and
  `get_spinner_klusterlet_status(klusterlet)` summarise object status for a
  spinner.
- `ocmadm.preflight`: subclass `Checker` with `check()` and `name()`.
  `run_checks(checks, out)` reports each check to `out` and raises
  `PreflightError` when any check returned errors.
- `ocmadm.jsonout`: `write_json_output(out, val)` writes JSON indented by two
  spaces, with dict keys sorted and `<`, `>` and `&` escaped. `HubInfo`
  serialises as `hub-token` and `hub-apiserver`.
- `ocmadm.resourcerequirement`: `parse_quantity("256Mi")` returns an exact
  `Quantity`. `new_resource_requirement(resource_type, limits, requests)`
  returns a `ResourceRequirement` and raises `ValueError` when the type does
  not fit what is set, when a quantity is malformed, or when a request exceeds
  its limit (`ensure_quantity`).
- `ocmadm.crdstatus`: `work_details`, `format_crd_version`, `print_crd`,
  `print_components_deploy` and `get_image_name` summarise manifest works,
  CRDs and deployments that you have already fetched.

## Example

```python
import sys
from ocmadm.treeprinter import TreePrinter
from ocmadm.resourcerequirement import new_resource_requirement

tp = TreePrinter("ClusterManager")
tp.add_fields("cluster-manager", {".registration": "applied", ".work": "applied"})
tp.print(sys.stdout)

rr = new_resource_requirement("ResourceRequirement", {"cpu": "200m"}, {"cpu": "100m"})
print(rr.limits["cpu"], rr.requests["cpu"])  # 200m 100m
```

## What this package does not do

It has no command-line program, and it opens no connection to a cluster. It
has no API client, no token or kubeconfig handling, no hub or managed-cluster
detection, and no waiting for CRDs or pods to become ready. Callers fetch
objects with their own client and pass the data to these helpers.
# stratus

A library for describing cloud attack techniques, driving them through
their lifecycle (COLD, WARM, DETONATED), and producing documentation
material for them.

## Modules

- `stratus.mitreattack`: the `Tactic` enumeration, with
  `attack_tactic_from_string` (case-insensitive, raises `ValueError` for an
  unknown name), `attack_tactic_to_string` and `get_all_mitre_attack_tactics`.
- `stratus.platform`: the `Platform` enumeration (`AWS`, `EKS`,
  `KUBERNETES`, `AZURE`, `ENTRA_ID`, `GCP`), `platform_from_string`
  (case-insensitive, raises `ValueError`) and `Platform.format_name`, which
  gives the display name such as `"Entra ID"`.
- `stratus.technique`: the `AttackTechnique` dataclass (ID, name,
  description, tactics, platform, prerequisite code, `detonate` and `revert`
  callables, idempotence and slowness flags), its `to_yaml_dict` export, and
  `AttackTechniqueState` (`COLD`, `WARM`, `DETONATED`).
- `stratus.registry`: a `Registry` of techniques, filtered with an
  `AttackTechniqueFilter` (by platform and/or tactic), and the process-wide
  registry returned by `get_registry()`.
- `stratus.useragent`: `user_agent_for_uuid` returns
  `stratus-red-team_<uuid>`.
- `stratus.runner`: the `Runner` with `warm_up`, `detonate`, `revert`,
  `clean_up` and `unique_execution_id`. Failures raise `RunnerError`.
  `resolve_correlation_id` reads `STRATUS_RED_TEAM_DETONATION_ID` from the
  environment, falling back to a random UUID.
- `stratus.index`: `build_index` groups techniques by platform and tactic
  name; `generate_yaml` writes that index to a YAML file.
- `stratus.coverage`: `render_coverage_matrices` returns the MITRE ATT&CK
  coverage page (one HTML table per platform); `generate_coverage_matrices`
  writes it to `<docs>/attack-techniques/mitre-attack-coverage-matrices.md`
  and returns the path.
- `stratus.techdocs`: `find_detonation_logs` loads
  `<logs_directory>/<technique_id>.json` into a `DetonationLogs` (sorted
  unique event names, indented raw logs, line numbers of `"eventName":`),
  `format_technique_description` and `format_platform_name`.

## Installation

```
pip install .
```

## Registering and filtering techniques

```python
from stratus.mitreattack import Tactic
from stratus.platform import Platform
from stratus.registry import AttackTechniqueFilter, get_registry
from stratus.technique import AttackTechnique

registry = get_registry()
registry.register_attack_technique(
    AttackTechnique(
        id="aws.persistence.create-iam-user",
        friendly_name="Create an IAM user",
        platform=Platform.AWS,
        mitre_attack_tactics=[Tactic.PERSISTENCE],
    )
)

aws = registry.get_attack_techniques(AttackTechniqueFilter(platform=Platform.AWS))
print([technique.id for technique in aws])
```

## Running a technique

`Runner` works through two objects you supply:

- a `StateManager` subclass implementing `get_root_directory`,
  `extract_technique`, `cleanup_technique`, `get_technique_state`,
  `set_technique_state`, `get_terraform_outputs` and
  `write_terraform_outputs`;
- a `TerraformManager` subclass implementing `terraform_init_and_apply`
  (returns the outputs as a `dict[str, str]`) and `terraform_destroy`.

```python
runner = Runner(technique, state_manager, terraform_manager, force=False)
runner.detonate()   # warms up first when needed
runner.clean_up()   # reverts, destroys prerequisites, returns to COLD
```

Progress messages go to the standard `logging` module.

## Generating documentation material

```python
from stratus.coverage import generate_coverage_matrices
from stratus.index import build_index, generate_yaml

index = build_index(registry.list_attack_techniques())
generate_coverage_matrices(index, "docs")
generate_yaml("docs/index.yaml", index)
```

Every technique in the index needs a platform for the YAML export.

## What this package does not do

- It has no command-line program.
- It ships no attack techniques; the registry starts empty.
- It has no concrete `StateManager` or `TerraformManager`, does not install
  or run Terraform, and has no cloud provider clients: `provider_factory` is
  passed to your `detonate`/`revert` callables unchanged.
- It does not render the per-technique pages or per-platform index pages
  from templates; `stratus.techdocs` only prepares the data for them.

## Running the tests

```
pip install .[test]
pytest
```
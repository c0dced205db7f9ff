# ecsdeploy

Building blocks for deploying Compose projects to Amazon ECS.

## Installation

```
pip install ecsdeploy
```

For running the tests:

```
pip install "ecsdeploy[test]"
pytest
```

## What is inside

- `ecsdeploy.units`: `MemBytes`, `bytes_size` and `ram_in_bytes` for
  human-readable memory sizes such as `128m` or `2g`. `MemBytes.parse("1k")`
  gives 1024, and `str()` of it gives `1KiB` (zero prints as `0`). Invalid
  input raises `ValueError`.
- `ecsdeploy.options`: the option sets `DownOptions`, `LogOptions`,
  `UpOptions`, `ListOptions` and `PsOptions`. The `check_down_options`,
  `check_log_options`, `check_up_options`, `check_list_options` and
  `check_ps_options` functions raise `UnsupportedFlagError` listing every
  option that is set to something ECS cannot honour.
- `ecsdeploy.logs`: the `LogConsumer` protocol, and `filtered_log_consumer`,
  which wraps a consumer in an `AllowListLogConsumer` so that only the named
  services get through. An empty list of services returns the consumer as is.
- `ecsdeploy.project`: `load_project` reads a Compose YAML document into a
  `Project` of `Service` and `Network` entries; `project_from_dict` does the
  same from an already parsed mapping. Only what machine selection and tagging
  need is read: images, placement constraints and resource reservations.
- `ecsdeploy.gpu`: `guess_machine_type` picks the first EC2 G4 instance type,
  in order of size, that meets the combined GPU, CPU and memory reservations of
  the project's GPU-bound services, or raises `NoMatchingMachineError`.
  `get_user_defined_machine` reads `node.ami == ...` and `node.machine == ...`
  placement constraints.
- `ecsdeploy.tags`: `project_tags`, `service_tags` and `network_tags` for
  resources.
- `ecsdeploy.iam`: IAM policy documents as dataclasses with `to_dict()`, and
  `policy_document(service)` for an assume-role policy.
- `ecsdeploy.marshall`: `marshall(template, fmt)` renders a CloudFormation
  template mapping as `"yaml"` or `"json"` bytes and marks containers whose
  name ends in `_InitContainer` as non-essential. Any other format raises
  `ValueError`.
- `ecsdeploy.stack`: `to_camel_case` (`CREATE_IN_PROGRESS` becomes
  `CreateInProgress`) and `event_progress`, which maps a stack event status
  and a `StackOperation` to a `ProgressStatus`.

```python
from ecsdeploy.project import load_project
from ecsdeploy.gpu import guess_machine_type

project = load_project("""
services:
  learning:
    image: tensorflow/tensorflow:latest-gpu
    deploy:
      resources:
        reservations:
          generic_resources:
            - discrete_resource_spec:
                kind: gpus
                value: 4
""", "demo")

print(guess_machine_type(project))  # g4dn.12xlarge
```

## Sidecar commands

Two small commands run in containers next to the application.

Append a `search` line to `/etc/resolv.conf`:

```
ecsdeploy-resolv example.internal other.internal
```

Write secrets taken from environment variables into `/run/secrets`. The
argument is a JSON list of secrets, each with a `Name` and optional `Keys`.
Without keys the raw value is written to `/run/secrets/<Name>`; with keys the
value must be a JSON object and each key is written to
`/run/secrets/<Name>/<key>` (`["*"]` selects every key):

```
ecsdeploy-secrets '[{"Name": "db_credentials", "Keys": ["*"]}]'
```

Both print the error to standard error and exit with status 1 on failure.

## What this package does not do

It does not talk to AWS. There is no command to deploy, update, list, inspect
or tear down a stack, no CloudFormation template generation from a Compose
project, and no access to ECS tasks, logs, secrets or EFS volumes. The modules
here provide the pieces around that: option checks, machine selection, tags,
policies, template serialisation and event status interpretation.
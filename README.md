# asmm8

asmm8 is a library for attack surface management. It stores seed domains and
the hostnames found under them in a PostgreSQL database. It finds new
subdomains by running external enumeration tools, and it provides Flask
handlers for a REST API over domains and hostnames.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `asmm8.models`: dataclasses `Domain`, `PostDomain`, `Hostname`,
  `PostHostname`, `ScanSettings`, `GeneralScanSettings`,
  `NotificationMetadata`, `Notification`, `AmqpMessage` and `ScanResult`, and
  the enums `NotificationEvent`, `NotificationChannel` and `RoleType`. Most of
  the dataclasses have `to_dict()` and `from_dict()`.
  - `PostDomain.from_dict` and `PostHostname.from_dict` raise `ValueError`
    when a required field is missing or has the wrong type.
  - `Hostname.to_dict()` writes the domain id under the key `dmainid`.
  - `parse_uuid(value)` accepts a `uuid.UUID` or a UUID string. For anything
    else it raises `ValueError`.
- `asmm8.db_domain.DomainRepository`,
  `asmm8.db_hostname.HostnameRepository` and
  `asmm8.db_settings.GeneralScanSettingsRepository` read and write the
  `cptm8domain`, `cptm8hostname` and `cptm8generalscansettings` tables.
  - They work through any DB-API connection that uses `%s` placeholders, for
    example a PostgreSQL driver.
  - Write methods run in a transaction. They commit on success, and on error
    they roll back and re-raise.
  - Single-row lookups return an empty model when no row matches.
  - `HostnameRepository.insert_batch(domainid, enabled, names)` upserts the
    names as live. It returns `True` if any row was inserted or changed.
- `asmm8.subfinder`:
  - `run_subfinder(seed_domain)` runs `subfinder` and returns the reported
    hostnames that contain the seed domain. It raises `SubfinderError` if the
    tool fails.
  - `filter_subdomains(output, seed_domain)` filters raw tool output.
- `asmm8.amass.run_amass(seed_domain)` runs `amass enum -passive` and then
  `oam_subs -names`. It returns the matching hostnames, or an empty list if
  either tool fails.
- `asmm8.httpx_runner.run_httpx(domains)` writes the domains to
  `tempHttpx.txt` and runs `httpx`, which writes CSV output to `temp.csv`. It
  raises `HttpxError` on failure.
- `asmm8.passive.PassiveRunner`: `run_passive_enum(prev_results)` runs
  subfinder for every seed domain in parallel.
  - It merges the earlier results for each domain and removes duplicates.
  - On failure it raises the first `SubfinderError`. The error's
    `partial_results` hold whatever had been found before the failure.
- `asmm8.notification`:
  - `build_notification(...)` builds a notification for the app channel.
  - `publish_notification(...)` publishes it to the `notification` exchange
    through a publisher you supply, and raises `RuntimeError` on failure.
  - `NotificationHelper` sets the routing keys `app.security.<severity>`,
    `app.error.<severity>` and `app.warning.<severity>`.
  - The publisher must have a method
    `publish_to_exchange(exchange, routing_key, payload, source)`.
- `asmm8.utils`:
  - `remove_duplicates` drops repeated items and keeps the order of first
    occurrence.
  - `difference` returns the items of the first list that are not in the
    second.
  - `build_where_query_for_domains` builds a clause of the form
    `name = "..." OR ...`.
  - `is_valid_ip_address` reports whether a string is an IPv4 or IPv6
    address.
  - `write_temp_file` appends lines to a file.
  - `check_tool` reports whether an executable is on `PATH`.
  - `install_tools` and `install_go_tool` run `go install` for `alterx`,
    `dnsx` and `subfinder` when they are missing.
- `asmm8.log.get_logger(log_file_path, log_level, app_env)` sets up the
  `asmm8` logger once per process.
  - It writes to a rotating file under `log/`.
  - `log_level` takes numeric levels: 0 is debug, 1 is info, 2 is warning and
    3 is error.
  - It also logs to stderr when `app_env` is given and is not `PROD`.

## Example: serving the REST API

```python
from flask import Flask

from asmm8.controller_domain import DomainController
from asmm8.controller_hostname import HostnameController

app = Flask(__name__)
db = ...  # a DB-API connection to the PostgreSQL database
DomainController(db).register(app)
HostnameController(db).register(app)
app.run(port=8000)
```

This registers the following routes:

| Method | Path                                    |
|--------|-----------------------------------------|
| POST   | `/domain`                               |
| GET    | `/domain`                               |
| GET    | `/domain/<id>`                          |
| PUT    | `/domain/<id>`                          |
| DELETE | `/domain/<id>`                          |
| POST   | `/domain/<id>/hostname`                 |
| GET    | `/domain/<id>/hostname`                 |
| GET    | `/domain/<id>/hostname/<hostnameid>`    |
| PUT    | `/domain/<id>/hostname/<hostnameid>`    |
| DELETE | `/domain/<id>/hostname/<hostnameid>`    |

Every response is a JSON object with `status` and `msg` fields. An invalid
UUID in the path or a bad request body gives status 400. A database error
gives status 500. `GET /domain/<id>/hostname` returns every stored hostname;
the domain id in the path does not filter the list.

## Example: passive enumeration

```python
from asmm8.passive import PassiveRunner

runner = PassiveRunner(seed_domains=["example.com"])
results = runner.run_passive_enum({"example.com": ["old.example.com"]})
print(results["example.com"])
```

`subfinder` must be on `PATH`. It reads its configuration from
`./configs/subfinderconfig.yaml` and `./configs/subfinderprovider-config.yaml`.

## What the package does not do

- It has no command and no server entry point. You build the Flask app
  yourself and supply the database connection.
- It reads no configuration files.
- It has no message broker client. Notifications go through the publisher
  object you pass in.
- It does not run active enumeration, live-host checks or scan-launching
  endpoints. Only the passive subfinder run is provided.
# zen

A small HTTP service for registering Python scripts together with a cron
expression. Job definitions are stored in an SQLite database and managed
through a JSON API built on Flask.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the server

```
zen
```

The server is configured through two environment variables. An unset or
empty variable falls back to its default:

| Variable      | Default  | Meaning                         |
|---------------|----------|---------------------------------|
| `ZEN_DB_PATH` | `zen.db` | Path to the SQLite database     |
| `ZEN_PORT`    | `8080`   | Port the HTTP server listens on |

The `jobs` table is created on start-up if it does not exist. If
`ZEN_PORT` is not a port number from 0 to 65535, or the database cannot be
opened, the command logs the error and exits with status 1.

Stop the server with Ctrl+C or SIGTERM. It stops taking requests, waits up
to ten seconds for the serving thread to finish, and closes the database.

## API

### Create a job

`POST /api/jobs/`

```json
{
  "Name": "nightly-report",
  "Description": "Builds the nightly report",
  "PythonFilePath": "/opt/scripts/report.py",
  "CronExpression": "0 2 * * *",
  "IsActive": true,
  "TimeoutSeconds": 300,
  "MaxRetries": 3
}
```

Keys are matched case-insensitively and underscores are ignored, so
`python_file_path` works as well as `PythonFilePath`. Unknown keys and
`null` values are ignored. A missing field takes its zero value: an empty
string, `false`, or `0`.

On success the response is `200` with `id`, `name`, `description` and
`created_at` (UTC, ISO 8601 with a trailing `Z`). The response is `400`
with an `error` field if the body is not valid JSON, is not a JSON object,
or has a field of the wrong type or an integer outside the 64-bit signed
range.

### Get a job

`GET /api/jobs/<id>`

The response is `200` with the full job record: `id`, `name`,
`description`, `python_file_path`, `cron_expression`, `is_active`,
`timeout_seconds`, `max_retries` and `created_at`.

If the id is not a decimal integer in the 64-bit signed range, the
response is `400` with `{"error": "Invalid job ID"}`. If no job has that
id, the response is `500` with `{"error": "job <id> not found"}`.

## Using it as a library

```python
from zen.app import App
from zen.types import CreateJobRequest

with App("zen.db") as app:
    request = CreateJobRequest.from_dict({
        "Name": "nightly-report",
        "PythonFilePath": "/opt/scripts/report.py",
        "CronExpression": "0 2 * * *",
        "IsActive": True,
    })
    created = app.job_service.create_job(request)
    job = app.job_service.get_job(created.id)
    print(job.to_dict())
```

The pieces can also be assembled by hand:

- `zen.app.connect_db(path)` opens an SQLite connection usable from
  several threads.
- `zen.repository.JobRepository(connection)` stores jobs; call
  `ensure_schema()` once to create the table. `get_job` raises
  `zen.repository.JobNotFoundError` for an unknown id.
- `zen.service.JobService(repository)` returns `CreateJobResponse` and
  `GetJobResponse` objects from `zen.types`; each has `to_dict()`.
- `zen.api.set_up_router(zen.api.JobHandler(service))` builds the Flask
  application.

`App.router` is that Flask application. You can serve it with any WSGI
server, or test it with its test client. `App.shutdown()` closes the
database and may be called more than once; leaving the `with` block calls
it.

## What it does not do

This package only stores and returns job definitions. It does not run the
scripts, does not read or check cron expressions, and has no endpoints to
list, change or delete jobs. It serves no API documentation pages and no
health-check endpoint.
# lokalise

A Python client for the Lokalise web API. It covers branches, comments,
contributors, files, keys, languages, orders, payment cards and queued
processes.

The package depends on `requests`.

## Getting started

All requests go through a `RestClient` from `lokalise.client`, created with
your API token. Each resource has a service class that takes the client:

```python
from lokalise.client import RestClient
from lokalise.languages import LanguageService

client = RestClient("token")
languages = LanguageService(client)

response = languages.list_project("3002780358964f9bab5a92.87762498")
for language in response.languages:
    print(language.lang_id, language.lang_iso)
```

`RestClient` takes these keyword options:

| Option        | Default                          | Meaning                                   |
|---------------|----------------------------------|-------------------------------------------|
| `base_url`    | `https://api.lokalise.com/api2`  | root of the API                           |
| `retry_count` | `3`                              | extra attempts after a failed request     |
| `retry_wait`  | `0.1`                            | seconds to wait between attempts          |
| `timeout`     | `None`                           | timeout passed to `requests`              |
| `debug`       | `False`                          | log each request on the `lokalise.client` logger |

Every request sends the token in the `X-Api-Token` header. A request is
retried when it fails on the network or the response has a 5xx status.

## Services

| Module                    | Service                 | Resource                     |
|---------------------------|-------------------------|------------------------------|
| `lokalise.branches`       | `BranchService`         | project branches             |
| `lokalise.comments`       | `CommentService`        | key comments                 |
| `lokalise.contributors`   | `ContributorService`    | project contributors         |
| `lokalise.files`          | `FileService`           | file upload and download     |
| `lokalise.keys`           | `KeyService`            | translation keys             |
| `lokalise.languages`      | `LanguageService`       | system and project languages |
| `lokalise.orders`         | `OrderService`          | translation orders           |
| `lokalise.payment_cards`  | `PaymentCardService`    | payment cards                |
| `lokalise.processes`      | `QueuedProcessService`  | queued background processes  |

Request bodies are dataclasses such as `NewKey`, `NewLanguage`,
`NewComment` and `FileUpload`. Responses come back as dataclasses too, for
example `KeysResponse` or `DeleteKeyResponse`. Every model has `to_dict()`
and `from_dict()` for its JSON form.

## Creating keys

```python
from lokalise.client import RestClient
from lokalise.keys import KeyService, NewKey

keys = KeyService(RestClient("token"))
result = keys.create(
    "3002780358964f9bab5a92.87762498",
    [NewKey(key_name="index.welcome", description="Index app welcome", platforms=["web"])],
    use_automations=False,
)
for key in result.keys:
    print(key.key_id)
for problem in result.errors:
    print(problem.key_name, problem.message)
```

In a `NewKey`, `tags=None` leaves tags out of the request, while `tags=[]`
sends an empty list. `bulk_update` takes `BulkUpdateKey` objects, which
carry a `key_id` as well, and `bulk_delete` takes a list of key ids.

## Uploading and downloading files

```python
from lokalise.client import RestClient
from lokalise.files import FileDownload, FileService, FileUpload

files = FileService(RestClient("token"))

upload = files.upload(
    "3002780358964f9bab5a92.87762498",
    FileUpload(data="<base64 content>", filename="index.json", lang_iso="en"),
)
print(upload.process.status)

bundle = files.download(
    "3002780358964f9bab5a92.87762498",
    FileDownload(format="json", original_filenames=True),
)
print(bundle.bundle_url)
```

Uploads are always sent with `queue` set. When you leave the custom
translation status flags unset, inserted and updated keys default to
`True` and skipped keys default to `False`. The upload object you pass in is
not changed.

## List options and pagination

Keys and files take their own list options. Set them with
`with_list_options`, which returns the service:

```python
from lokalise.client import RestClient
from lokalise.keys import KeyListOptions, KeyService

keys = KeyService(RestClient("token")).with_list_options(
    KeyListOptions(limit=3, include_translations=1)
)
response = keys.list("3002780358964f9bab5a92.87762498")
```

`KeyService.with_retrieve_options` does the same for `retrieve`.

The other list calls page with `PageOptions`. `set_page_options` takes over
only the non-zero `limit` and `page`:

```python
from lokalise.branches import BranchService
from lokalise.client import RestClient
from lokalise.pagination import PageOptions

branches = BranchService(RestClient("token"))
branches.set_page_options(PageOptions(page=2, limit=10))
response = branches.list("3002780358964f9bab5a92.87762498")
```

List responses carry the pagination headers as `total_count`, `page_count`,
`limit` and `page`, with `number_of_pages` and `current_page` as
shorthands. A field is `-1` when the server did not send that header or
sent something that is not an integer.

## Errors

An error reported by the API is raised as `ApiError` from `lokalise.errors`,
which carries the `code` and `message` of the response. Every error raised by
the package derives from `LokaliseError`; it is also raised when a request
still fails on the network after all retries, when an error response has no
body or an unknown shape, and when a successful response is not valid JSON.

```python
from lokalise.client import RestClient
from lokalise.errors import ApiError
from lokalise.languages import LanguageService

languages = LanguageService(RestClient("token"))
try:
    languages.retrieve("3002780358964f9bab5a92.87762498", 640)
except ApiError as error:
    print(error.code, error.message)
```

## What this package does not do

There is no service for creating, listing or deleting projects, and no
single client object that hands out the services; create each service from
a `RestClient` yourself. There is no command-line tool.
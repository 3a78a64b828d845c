import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from lokalise.client import RestClient
from lokalise.comments import Comment
from lokalise.errors import ApiError
from lokalise.keys import (
    BulkUpdateKey,
    DeleteKeyResponse,
    DeleteKeysResponse,
    ErrorKeys,
    Key,
    KeyListOptions,
    KeyRetrieveOptions,
    KeyService,
    KeysResponse,
    NewKey,
    PlatformStrings,
)

BASE = "https://api.example.com/api2"
PROJECT_ID = "3002780358964f9bab5a92.87762498"
KEYS_URL = f"{BASE}/projects/{PROJECT_ID}/keys"

CREATED_KEY_PAYLOAD = {
    "project_id": PROJECT_ID,
    "keys": [
        {
            "key_id": 331223,
            "created_at": "2018-12-31 12:00:00 (Etc/UTC)",
            "created_at_timestamp": 1546257600,
            "key_name": {
                "ios": "index.welcome",
                "android": "index.welcome",
                "web": "index.welcome",
                "other": "index.welcome",
            },
            "filenames": {"ios": "", "android": "", "web": "", "other": ""},
            "description": "Index app welcome",
            "platforms": ["web"],
            "tags": [],
            "comments": [],
            "screenshots": [],
            "translations": [
                {
                    "translation_id": 444921,
                    "key_id": 331223,
                    "language_iso": "en",
                    "translation": "Welcome",
                    "modified_by": 420,
                    "modified_by_email": "translator@example.com",
                    "modified_at": "2018-12-31 12:00:00 (Etc/UTC)",
                    "modified_at_timestamp": 1546257600,
                    "is_reviewed": False,
                    "reviewed_by": 0,
                    "words": 0,
                }
            ],
        }
    ],
    "errors": [
        {"message": "This key name is already taken", "code": 400, "key": {"key_name": "index.hello"}}
    ],
}

EXPECTED_CREATED_KEY = Key(
    key_id=331223,
    created_at="2018-12-31 12:00:00 (Etc/UTC)",
    created_at_ts=1546257600,
    key_name=PlatformStrings(
        ios="index.welcome", android="index.welcome", web="index.welcome", other="index.welcome"
    ),
    filenames=PlatformStrings(),
    description="Index app welcome",
    platforms=["web"],
    tags=[],
    comments=[],
    screenshots=[],
    translations=[
        {
            "translation_id": 444921,
            "key_id": 331223,
            "language_iso": "en",
            "translation": "Welcome",
            "modified_by": 420,
            "modified_by_email": "translator@example.com",
            "modified_at": "2018-12-31 12:00:00 (Etc/UTC)",
            "modified_at_timestamp": 1546257600,
            "is_reviewed": False,
            "reviewed_by": 0,
            "words": 0,
        }
    ],
)

NEW_KEY_BODY = {
    "key_name": "index.welcome",
    "description": "Index app welcome",
    "platforms": ["web"],
    "translations": [
        {"language_iso": "en", "translation": "Welcome", "custom_translation_status_ids": [1, 2, 3]}
    ],
}

BULK_KEY_BODY = {
    "key_id": 331223,
    "key_name": "index.welcome",
    "description": "Index app welcome",
    "platforms": ["web"],
    "translations": [
        {
            "language_iso": "en",
            "translation": "Welcome",
            "custom_translation_status_ids": [1, 2, 3],
            "merge_custom_translation_statuses": True,
        }
    ],
}


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return KeyService(RestClient("token", base_url=BASE, retry_count=0))


def _request(mock, index=0):
    request = mock.calls[index].request
    assert request.headers["X-Api-Token"] == "token"
    return request


def _body(mock, index=0):
    return json.loads(_request(mock, index).body)


def _new_key():
    return NewKey(
        key_name="index.welcome",
        description="Index app welcome",
        platforms=["web"],
        translations=[
            {"language_iso": "en", "translation": "Welcome", "custom_translation_status_ids": [1, 2, 3]}
        ],
    )


def _bulk_key():
    return BulkUpdateKey(
        key_id=331223,
        key_name="index.welcome",
        description="Index app welcome",
        platforms=["web"],
        translations=[
            {
                "language_iso": "en",
                "translation": "Welcome",
                "custom_translation_status_ids": [1, 2, 3],
                "merge_custom_translation_statuses": True,
            }
        ],
    )


def test_bulk_delete(mock, service):
    mock.add(
        responses.DELETE,
        KEYS_URL,
        json={"project_id": PROJECT_ID, "keys_removed": True, "keys_locked": 0},
    )
    result = service.bulk_delete(PROJECT_ID, [12345, 12346])
    assert _body(mock) == {"keys": [12345, 12346]}
    assert result == DeleteKeysResponse(project_id=PROJECT_ID, are_removed=True, number_of_locked=0)


def test_bulk_update(mock, service):
    mock.add(
        responses.PUT,
        KEYS_URL,
        json={"project_id": PROJECT_ID, "keys": [{"key_id": 331223}], "errors": []},
    )
    result = service.bulk_update(PROJECT_ID, [_bulk_key()])
    assert _body(mock) == {"keys": [BULK_KEY_BODY]}
    assert result.keys == [Key(key_id=331223)]


def test_bulk_update_automations_disabled(mock, service):
    mock.add(
        responses.PUT,
        KEYS_URL,
        json={"project_id": PROJECT_ID, "keys": [{"key_id": 331223}], "errors": []},
    )
    result = service.bulk_update(PROJECT_ID, [_bulk_key()], use_automations=False)
    assert _body(mock) == {"keys": [BULK_KEY_BODY], "use_automations": False}
    assert result.keys == [Key(key_id=331223)]


def test_create(mock, service):
    mock.add(responses.POST, KEYS_URL, json=CREATED_KEY_PAYLOAD)
    result = service.create(PROJECT_ID, [_new_key()])
    assert mock.calls[0].request.method == "POST"
    assert _body(mock) == {"keys": [NEW_KEY_BODY]}
    assert result.keys == [EXPECTED_CREATED_KEY]


def test_create_automations_disabled(mock, service):
    mock.add(responses.POST, KEYS_URL, json=CREATED_KEY_PAYLOAD)
    result = service.create(PROJECT_ID, [_new_key()], use_automations=False)
    assert _body(mock) == {"keys": [NEW_KEY_BODY], "use_automations": False}
    assert result.keys == [EXPECTED_CREATED_KEY]


def test_create_plural_translation_encoded(mock, service):
    mock.add(responses.POST, KEYS_URL, json=CREATED_KEY_PAYLOAD)
    result = service.create(
        PROJECT_ID,
        [
            NewKey(
                key_name="index.welcome",
                description="Index app welcome",
                platforms=["web"],
                is_plural=True,
                translations=[{"language_iso": "en", "translation": {"one": "oneText", "other": "otherText"}}],
            )
        ],
    )
    assert _body(mock) == {
        "keys": [
            {
                "key_name": "index.welcome",
                "description": "Index app welcome",
                "platforms": ["web"],
                "translations": [
                    {"language_iso": "en", "translation": {"one": "oneText", "other": "otherText"}}
                ],
                "is_plural": True,
            }
        ]
    }
    assert result.keys == [EXPECTED_CREATED_KEY]


def test_delete(mock, service):
    mock.add(
        responses.DELETE,
        f"{KEYS_URL}/640",
        json={"project_id": PROJECT_ID, "key_removed": False, "keys_locked": 1},
    )
    result = service.delete(PROJECT_ID, 640)
    assert _request(mock).method == "DELETE"
    assert result == DeleteKeyResponse(project_id=PROJECT_ID, is_removed=False, number_of_locked=1)


def test_list(mock, service):
    mock.add(responses.GET, KEYS_URL, json={"keys": [{"key_id": 640}]})
    result = service.list(PROJECT_ID)
    assert _request(mock).method == "GET"
    assert result.keys == [Key(key_id=640)]
    assert result.total_count == -1


def test_list_sends_list_options(mock, service):
    mock.add(responses.GET, KEYS_URL, json={"keys": [{"key_id": 7}]})
    result = service.with_list_options(KeyListOptions(limit=3, include_comments=1)).list(PROJECT_ID)
    query = parse_qs(urlsplit(_request(mock).url).query)
    assert query == {"limit": ["3"], "include_comments": ["1"]}
    assert result.keys == [Key(key_id=7)]


def test_list_reads_paging_headers(mock, service):
    mock.add(
        responses.GET,
        KEYS_URL,
        json={"keys": []},
        headers={"X-Pagination-Total-Count": "7", "X-Pagination-Page": "2"},
    )
    result = service.list(PROJECT_ID)
    assert (result.total_count, result.page, result.page_count) == (7, 2, -1)


def test_retrieve(mock, service):
    mock.add(responses.GET, f"{KEYS_URL}/640", json={"project_id": PROJECT_ID, "key": {"key_id": 640}})
    result = service.retrieve(PROJECT_ID, 640)
    assert _request(mock).method == "GET"
    assert result.key == Key(key_id=640)
    assert result.project_id == PROJECT_ID


def test_retrieve_sends_retrieve_options(mock, service):
    mock.add(responses.GET, f"{KEYS_URL}/640", json={"key": {"key_id": 640}})
    result = service.with_retrieve_options(KeyRetrieveOptions(disable_references=1)).retrieve(PROJECT_ID, 640)
    assert parse_qs(urlsplit(_request(mock).url).query) == {"disable_references": ["1"]}
    assert result.key == Key(key_id=640)


def test_update(mock, service):
    mock.add(responses.PUT, f"{KEYS_URL}/640", json={"project_id": PROJECT_ID, "key": {"key_id": 640}})
    result = service.update(
        PROJECT_ID, 640, NewKey(platforms=["web", "other"], description="Index app welcome")
    )
    assert _body(mock) == {"description": "Index app welcome", "platforms": ["web", "other"]}
    assert result.key == Key(key_id=640)


def test_update_empty_tags(mock, service):
    mock.add(responses.PUT, f"{KEYS_URL}/640", json={"project_id": PROJECT_ID, "key": {"key_id": 640}})
    result = service.update(
        PROJECT_ID, 640, NewKey(platforms=["web", "other"], description="Index app welcome", tags=[])
    )
    assert _body(mock) == {"description": "Index app welcome", "platforms": ["web", "other"], "tags": []}
    assert result.key == Key(key_id=640)


def test_api_error_is_raised(mock, service):
    mock.add(
        responses.GET,
        f"{KEYS_URL}/1",
        status=404,
        json={"error": {"code": 404, "message": "Not Found"}},
    )
    with pytest.raises(ApiError) as info:
        service.retrieve(PROJECT_ID, 1)
    assert info.value == ApiError(404, "Not Found")


def test_new_key_omits_unset_tags():
    assert NewKey(description="d").to_dict() == {"description": "d"}


def test_new_key_keeps_empty_tags_and_platform_names():
    key = NewKey(key_name=PlatformStrings(ios="a", web="b"), tags=[])
    assert key.to_dict() == {"key_name": {"ios": "a", "web": "b"}, "tags": []}


def test_bulk_update_key_puts_key_id_first():
    data = BulkUpdateKey(key_id=5, description="x", tags=["t"]).to_dict()
    assert list(data) == ["key_id", "description", "tags"]
    assert data == {"key_id": 5, "description": "x", "tags": ["t"]}


def test_error_keys_decoded_from_error_field():
    result = KeysResponse.from_dict(
        {"error": [{"code": 400, "message": "This key name is already taken", "key": {"key_name": "index.hello"}}]}
    )
    assert result.errors == [ErrorKeys(code=400, message="This key name is already taken", key_name="index.hello")]
    assert result.errors[0].error == ApiError(400, "This key name is already taken")


def test_error_keys_round_trip():
    error = ErrorKeys(code=400, message="taken", key_name="index.hello")
    assert ErrorKeys.from_dict(error.to_dict()) == error


def test_key_decodes_comments():
    key = Key.from_dict({"key_id": 1, "comments": [{"comment_id": 44444, "comment": "hi"}]})
    assert key.comments == [Comment(comment_id=44444, comment="hi")]
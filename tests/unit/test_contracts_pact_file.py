"""Unit tests for pact document schemas and loading."""

import json

import pytest

from fullname_api.contracts.pact_file import PactFileError, load_pact
from fullname_api.schemas.contract_schemas import Interaction


@pytest.mark.unit
class TestLoadPact:
    """load_pact reads and validates pact files."""

    def test_recorded_pact(self, pact_file):
        """The shipped pact holds the four recorded interactions in order."""
        pact = load_pact(pact_file)

        assert pact.consumer.name == "FullNameApi.Consumer"
        assert pact.provider.name == "FullNameApi.Provider"
        assert [i.response.status for i in pact.interactions] == [200, 400, 400, 405]

    def test_missing_file(self, tmp_path):
        with pytest.raises(PactFileError, match="Cannot read"):
            load_pact(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PactFileError, match="Invalid pact file"):
            load_pact(path)

    def test_interaction_without_status(self, tmp_path):
        path = tmp_path / "no_status.json"
        path.write_text(
            json.dumps(
                {
                    "interactions": [
                        {
                            "description": "x",
                            "request": {"method": "GET"},
                            "response": {},
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )

        with pytest.raises(PactFileError):
            load_pact(path)


@pytest.mark.unit
class TestInteractionSchema:
    """Interaction bodies and headers in V2 and V4 shapes."""

    def test_v4_wrapped_body(self):
        interaction = Interaction.model_validate(
            {
                "description": "wrapped",
                "request": {
                    "method": "POST",
                    "headers": {"Content-Type": ["application/json; charset=utf-8"]},
                    "body": {
                        "content": {"FirstName": "John"},
                        "contentType": "application/json",
                        "encoded": False,
                    },
                },
                "response": {"status": 400, "body": {"content": {"error": "x"}}},
            }
        )

        assert interaction.request.content == {"FirstName": "John"}
        assert interaction.request.body_text() == '{"FirstName":"John"}'
        assert interaction.request.header_values() == {
            "Content-Type": "application/json; charset=utf-8"
        }
        assert interaction.response.content == {"error": "x"}

    def test_bare_body(self):
        interaction = Interaction.model_validate(
            {
                "description": "bare",
                "request": {"method": "POST", "path": "/", "body": {"LastName": "Doe"}},
                "response": {"status": 400, "body": {"error": "x"}},
            }
        )

        assert interaction.request.body_text() == '{"LastName":"Doe"}'
        assert interaction.response.content == {"error": "x"}

    def test_body_with_content_key_is_not_unwrapped(self):
        """Objects with keys beyond the wrapper keys are real bodies."""
        body = {"content": "hello", "author": "me"}
        interaction = Interaction.model_validate(
            {
                "description": "content field",
                "request": {"method": "POST", "body": body},
                "response": {"status": 200},
            }
        )

        assert interaction.request.content == body

    def test_no_body(self):
        interaction = Interaction.model_validate(
            {
                "description": "get",
                "request": {"method": "GET"},
                "response": {"status": 405},
            }
        )

        assert interaction.request.path == "/"
        assert interaction.request.body_text() is None
        assert interaction.request.header_values() == {}
        assert interaction.response.content is None

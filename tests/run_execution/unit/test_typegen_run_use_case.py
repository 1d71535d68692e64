"""Run execution use-case tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests
from profile_typegen.configuration import EmitMode
from profile_typegen.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_profile_typegen_run,
)

BASE = "http://x"


@pytest.fixture
def two_schema_client(make_http_client, fake_response, make_profile_body, make_schema_body):
    return make_http_client(
        {
            f"{BASE}/profile": fake_response(200, make_profile_body(BASE, "people", "orders")),
            f"{BASE}/profile/people": fake_response(200, make_schema_body("Person")),
            f"{BASE}/profile/orders": fake_response(200, make_schema_body("Order")),
        }
    )


def test_run_emits_first_compiled_definition_by_default(two_schema_client, fake_compiler) -> None:
    outcome = execute_profile_typegen_run(
        RunRequest(url=BASE),
        http_client_factory=lambda _settings: two_schema_client,
        compiler_factory=lambda _settings: fake_compiler,
    )

    assert outcome.schema_titles == ("Person", "Order")
    assert outcome.emitted == ("type Person = {age, name}\n",)
    assert len(fake_compiler.calls) == 2
    assert two_schema_client.closed


def test_run_emits_every_definition_in_all_mode(two_schema_client, fake_compiler) -> None:
    outcome = execute_profile_typegen_run(
        RunRequest(url=BASE, emit_mode=EmitMode.ALL),
        http_client_factory=lambda _settings: two_schema_client,
        compiler_factory=lambda _settings: fake_compiler,
    )

    assert outcome.emitted == ("type Person = {age, name}\n", "type Order = {age, name}\n")


def test_run_applies_configuration_file(
    tmp_path: Path, two_schema_client, fake_compiler
) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("emit:\n  mode: all\n  additional_properties: true\n", encoding="utf-8")
    seen = []

    def http_client_factory(settings):
        seen.append(settings)
        return two_schema_client

    outcome = execute_profile_typegen_run(
        RunRequest(url=BASE, config_path=str(config_path)),
        http_client_factory=http_client_factory,
        compiler_factory=lambda _settings: fake_compiler,
    )

    assert len(outcome.emitted) == 2
    assert seen[0].emit.mode is EmitMode.ALL
    assert all(additional for _name, additional in fake_compiler.calls)


def test_run_wraps_pipeline_failures(make_http_client, fake_response, fake_compiler) -> None:
    client = make_http_client({f"{BASE}/profile": fake_response(404, {})})

    with pytest.raises(RunExecutionError, match="^Fetch request failed$"):
        execute_profile_typegen_run(
            RunRequest(url=BASE),
            http_client_factory=lambda _settings: client,
            compiler_factory=lambda _settings: fake_compiler,
        )
    assert client.closed
    assert fake_compiler.calls == []


def test_run_wraps_transport_errors(fake_compiler) -> None:
    class UnreachableClient:
        closed = False

        def get(self, url, *, headers=None):
            raise requests.ConnectionError(f"cannot reach {url}")

        def close(self) -> None:
            self.closed = True

    client = UnreachableClient()

    with pytest.raises(RunExecutionError, match="ConnectionError: cannot reach http://x/profile"):
        execute_profile_typegen_run(
            RunRequest(url=BASE),
            http_client_factory=lambda _settings: client,
            compiler_factory=lambda _settings: fake_compiler,
        )
    assert client.closed


def test_run_wraps_json_decode_errors(make_http_client, fake_response, fake_compiler) -> None:
    client = make_http_client({f"{BASE}/profile": fake_response(200, text="not json")})

    with pytest.raises(RunExecutionError, match="JSONDecodeError"):
        execute_profile_typegen_run(
            RunRequest(url=BASE),
            http_client_factory=lambda _settings: client,
            compiler_factory=lambda _settings: fake_compiler,
        )


def test_run_wraps_configuration_errors(tmp_path: Path, fake_compiler) -> None:
    with pytest.raises(RunExecutionError, match="Configuration file not found"):
        execute_profile_typegen_run(
            RunRequest(url=BASE, config_path=str(tmp_path / "absent.yaml")),
            http_client_factory=lambda _settings: pytest.fail("client must not be built"),
            compiler_factory=lambda _settings: fake_compiler,
        )


def test_run_requires_injected_client_and_compiler_factories() -> None:
    with pytest.raises(TypeError):
        execute_profile_typegen_run(RunRequest(url=BASE))  # type: ignore[call-arg]

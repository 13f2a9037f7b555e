"""Tests for configuration loading and factory functions."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import httpx
import pytest
from pydantic import ValidationError

from spacex_launches.cache import LaunchpadCache
from spacex_launches.client import SpaceXClient
from spacex_launches.config import (
    ClientConfig,
    LaunchTrackerConfig,
    ListConfig,
    TimeoutConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from spacex_launches.config.factory import (
    create_client,
    create_controller,
    create_search_debouncer,
)
from spacex_launches.controller import LaunchListController
from spacex_launches.debounce import Debouncer
from spacex_launches.errors import ApiUnavailableError, FetchFailedError


def write_yaml(content: str) -> Path:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        f.flush()
    return Path(f.name)


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_timeout_defaults(self) -> None:
        config = TimeoutConfig()
        assert config.search == 15.0
        assert config.list == 10.0
        assert config.fallback == 10.0
        assert config.launchpad == 10.0
        assert config.health == 5.0

    def test_client_config_defaults(self) -> None:
        config = ClientConfig()
        assert config.base_url is None
        assert isinstance(config.timeouts, TimeoutConfig)

    def test_list_config_defaults(self) -> None:
        config = ListConfig()
        assert config.page_size == 20
        assert config.search_debounce_seconds == 0.5

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(ValidationError):
            ListConfig(page_size=0)

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            TimeoutConfig(search=0)

    def test_configs_are_frozen(self) -> None:
        config = ListConfig()
        with pytest.raises(ValidationError):
            config.page_size = 5  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        path = write_yaml(
            """
client:
  base_url: https://mirror.test
  timeouts:
    search: 30
list:
  page_size: 10
"""
        )
        config = load_config(path)

        assert config.client.base_url == "https://mirror.test"
        assert config.client.timeouts.search == 30.0
        assert config.client.timeouts.list == 10.0
        assert config.list.page_size == 10

    def test_empty_file_uses_defaults(self) -> None:
        config = load_config(write_yaml(""))
        assert config == LaunchTrackerConfig()

    def test_invalid_config_raises(self) -> None:
        with pytest.raises(ValidationError):
            load_config(write_yaml("list:\n  page_size: -3\n"))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_default_config_loads(self) -> None:
        path = get_default_config_path()
        assert path.exists()
        assert load_config(path) == LaunchTrackerConfig()


class TestFactory:
    """Tests for factory functions."""

    def test_create_client_applies_timeouts(self) -> None:
        config = ClientConfig(
            base_url="https://mirror.test",
            timeouts=TimeoutConfig(search=1, list=2, fallback=3, launchpad=4, health=0.5),
        )
        client = create_client(config)

        assert client.base_url == "https://mirror.test"
        assert client._search_timeout == 1
        assert client._list_timeout == 2
        assert client._fallback_timeout == 3
        assert client._launchpad_timeout == 4
        assert client._health_timeout == 0.5

    def test_create_controller_uses_page_size(self) -> None:
        controller = create_controller(ListConfig(page_size=7), SpaceXClient())
        assert controller.page_size == 7

    async def test_create_from_config_wires_components(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[]))
        config = LaunchTrackerConfig()
        client, controller, cache, debouncer = create_from_config(config, transport=transport)

        assert isinstance(client, SpaceXClient)
        assert isinstance(controller, LaunchListController)
        assert isinstance(cache, LaunchpadCache)
        assert isinstance(debouncer, Debouncer)

        await controller.load_initial()
        assert controller.state.items == ()
        assert controller.state.error is None

    def test_create_search_debouncer_uses_configured_delay(self) -> None:
        controller = create_controller(ListConfig(), SpaceXClient())
        debouncer = create_search_debouncer(ListConfig(search_debounce_seconds=0.2), controller)
        assert debouncer.delay == 0.2

    def test_create_from_config_applies_debounce_delay(self) -> None:
        config = LaunchTrackerConfig(list=ListConfig(search_debounce_seconds=1.25))
        *_, debouncer = create_from_config(config)
        assert debouncer.delay == 1.25

    async def test_debounced_input_reaches_controller(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"docs": []})

        config = LaunchTrackerConfig(list=ListConfig(search_debounce_seconds=0.01))
        _, controller, _, debouncer = create_from_config(
            config, transport=httpx.MockTransport(handler)
        )

        debouncer("Star")
        debouncer(" Starlink ")
        await debouncer.wait()

        assert controller.state.search_term == "Starlink"
        assert [request.method for request in requests] == ["POST"]

    async def test_configured_timeouts_reach_each_request(self) -> None:
        seen: dict[str, float] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            read = request.extensions["timeout"]["read"]
            if request.url.path.startswith("/v4/launchpads/"):
                seen["launchpad"] = read
                return httpx.Response(503)
            if request.method == "POST":
                seen["search"] = read
                return httpx.Response(500)
            if "page" in request.url.params:
                seen["list"] = read
                return httpx.Response(500)
            if request.url.params.get("limit") == "1":
                seen["health"] = read
                return httpx.Response(500)
            seen["fallback"] = read
            return httpx.Response(500)

        config = ClientConfig(
            base_url="https://api.test",
            timeouts=TimeoutConfig(search=1, list=2, fallback=3, launchpad=4, health=5),
        )
        client = create_client(config, transport=httpx.MockTransport(handler))

        with pytest.raises(ApiUnavailableError):
            await client.fetch_launches(query="Falcon")
        with pytest.raises(ApiUnavailableError):
            await client.fetch_launches()
        with pytest.raises(FetchFailedError):
            await client.fetch_launchpad("pad-1")

        assert seen == {"search": 1, "list": 2, "fallback": 3, "launchpad": 4, "health": 5}

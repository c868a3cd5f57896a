"""Integration test fixtures and configuration."""

import httpx
import pytest
import yaml

from film_links.config import ConfigManager
from film_links.core.interfaces import ICatalogService, ISuggestionService
from film_links.core.services import SuggestionService
from film_links.infrastructure import Container


@pytest.fixture
def integration_config(tmp_path):
    """Create integration test configuration file."""
    config_data = {
        "tmdb": {"api_key": "integration-tmdb-key"},
        "suggestions": {"base_url": "http://suggestions.test/suggestion-list/movies"},
        "enrichment": {"max_concurrency": 2},
        "logging": {"level": "WARNING"},
    }

    config_file = tmp_path / "integration_config.yaml"
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(config_data, f)

    return config_file


@pytest.fixture
def suggestion_requests():
    """Search literals received by the mock suggestion server."""
    return []


@pytest.fixture
def failing_titles():
    """Search literals the mock suggestion server answers with HTTP 500."""
    return set()


@pytest.fixture
def suggestion_transport(known_titles, suggestion_requests, failing_titles):
    """httpx transport answering like the suggestion server."""

    def handler(request: httpx.Request) -> httpx.Response:
        search = request.url.params["normalizedInput"]
        suggestion_requests.append(search)
        if search in failing_titles:
            return httpx.Response(500, text="Internal Server Error")
        if search not in known_titles:
            return httpx.Response(
                200, json={"suggestions": [{"movie_id": None, "title": search}]}
            )
        return httpx.Response(
            200,
            json={
                "suggestions": [
                    {"movie_id": 1, "title": f"{search} II", "popularity_rank": 2},
                    {"movie_id": 2, "title": search, "popularity_rank": 1},
                ]
            },
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def integration_container(integration_config, catalog_service, suggestion_transport):
    """Container with the real suggestion client over a mock transport."""
    config_manager = ConfigManager(integration_config)
    container = Container(config_manager)
    container.configure_default_services()

    container.register_instance(ICatalogService, catalog_service)
    container.register_instance(
        ISuggestionService,
        SuggestionService(container.get_config(), transport=suggestion_transport),
    )

    return container

"""CLI integration tests."""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from film_links.cli import cli

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _invoke(container, *args):
    return CliRunner().invoke(cli, list(args), obj={"container": container})


@pytest.mark.integration
def test_cli_help():
    """Test CLI help command."""
    result = subprocess.run(
        [sys.executable, "-m", "film_links.cli", "--help"],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )

    assert result.returncode == 0
    assert "Film Links" in result.stdout
    assert "links" in result.stdout
    assert "actor-links" in result.stdout
    assert "init" in result.stdout


@pytest.mark.integration
def test_cli_init_command(tmp_path):
    """Test CLI init command."""
    config_path = tmp_path / "test_config.yaml"

    result = subprocess.run(
        [sys.executable, "-m", "film_links.cli", "init", "--output", str(config_path)],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )

    assert result.returncode == 0
    assert config_path.exists()

    content = config_path.read_text()
    assert "tmdb:" in content
    assert "enrichment:" in content


@pytest.mark.integration
def test_cli_status_command(integration_config):
    """Test CLI status command with a configuration file."""
    result = subprocess.run(
        [sys.executable, "-m", "film_links.cli", "--config", str(integration_config), "status"],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )

    assert result.returncode == 0
    assert "Max Concurrency: 2" in result.stdout
    assert "suggestions.test" in result.stdout


@pytest.mark.integration
def test_cli_missing_config(tmp_path):
    """Test that a configuration without TMDb settings is reported."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("logging:\n  level: INFO\n")

    result = subprocess.run(
        [sys.executable, "-m", "film_links.cli", "--config", str(config_file), "status"],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )

    assert result.returncode == 1
    assert "Configuration error" in result.stderr


@pytest.mark.integration
def test_cli_links(integration_container):
    """Test resolving links from the command line."""
    result = _invoke(integration_container, "links", "Inception (2010)")

    assert result.exit_code == 0
    film = json.loads(result.output)
    assert film["name"] == "Inception"
    assert [actor["id"] for actor in film["cast"]] == [525, 6193]
    assert "resolved_ids" not in film["cast"][0]


@pytest.mark.integration
def test_cli_actor_links(integration_container):
    """Test resolving one actor from the command line."""
    result = _invoke(integration_container, "actor-links", "6193", "--exclude-movie", "27205")

    assert result.exit_code == 0
    actor = json.loads(result.output)
    assert [movie["release_year"] for movie in actor["movies"]] == [2015, 1997]


@pytest.mark.integration
def test_cli_movie_by_id(integration_container):
    """Test looking up a movie by ID without one of its cast."""
    result = _invoke(integration_container, "movie-by-id", "27205", "--exclude-actor", "525")

    assert result.exit_code == 0
    film = json.loads(result.output)
    assert film["release_date"] == "2010-07-15"
    assert [actor["id"] for actor in film["cast"]] == [6193, 99001]


@pytest.mark.integration
def test_cli_related(integration_container):
    """Test listing related movies."""
    result = _invoke(integration_container, "related", "27205")

    assert result.exit_code == 0
    films = json.loads(result.output)
    assert 27205 not in [film["id"] for film in films]


@pytest.mark.integration
def test_cli_suggestions(integration_container):
    """Test listing suggestions for free text."""
    result = _invoke(integration_container, "suggestions", "Memento (2000)")

    assert result.exit_code == 0
    response = json.loads(result.output)
    assert [s["title"] for s in response["suggestions"]] == ["Memento (2000) II", "Memento (2000)"]


@pytest.mark.integration
def test_cli_unknown_movie(integration_container):
    """Test that an unknown movie prints the empty film."""
    result = _invoke(integration_container, "links-by-id", "1")

    assert result.exit_code == 0
    assert json.loads(result.output)["id"] == 0


@pytest.mark.integration
def test_cli_invalid_query(integration_container):
    """Test that a malformed year exits with a usage error."""
    result = _invoke(integration_container, "movie", "Inception (twenty ten)")

    assert result.exit_code == 2
    assert "Invalid query" in result.output


@pytest.mark.integration
def test_cli_movie(integration_container):
    """Test looking up a movie by title from the command line."""
    result = _invoke(integration_container, "movie", "Inception (2010)")

    assert result.exit_code == 0
    film = json.loads(result.output)
    assert film["id"] == 27205
    assert film["cast"][0]["title"] == "Director"


@pytest.mark.integration
def test_cli_actor(integration_container):
    """Test looking up a person without links."""
    result = _invoke(integration_container, "actor", "525")

    assert result.exit_code == 0
    actor = json.loads(result.output)
    assert actor["name"] == "Christopher Nolan"
    assert actor["movies"] == []

"""Test configuration and fixtures for jobfilter tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

from jobfilter.catalog import Folder, Job, RootGroup


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="jobfilter_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def root():
    """Virtual root group (no simple name)."""
    return RootGroup("All")


@pytest.fixture
def release_folder(root):
    """Folder ``release`` holding two jobs with builds.

    release/                  (display "Release Builds")
        build-42              (display "Build 42", builds #5 and #6)
        deploy                (display "Deploy", build "1.2.3")
    """
    folder = Folder("release", root, "Release Builds")
    build_job = Job("build-42", folder, "Build 42")
    build_job.add_build(5)
    build_job.add_build(6)
    deploy = Job("deploy", folder, "Deploy")
    deploy.add_build(1, display_name="1.2.3")
    folder.items = [build_job, deploy]
    root.items.append(folder)
    return folder


@pytest.fixture
def build_job(release_folder):
    """The ``release/build-42`` job."""
    return release_folder.items[0]


@pytest.fixture
def make_item():
    """Factory for duck-typed items without a catalog."""

    def _create(
        name="build-42",
        full_name="folder/build-42",
        display_name="Build 42",
        full_display_name="folder » Build 42",
        parent=None,
        all_jobs=None,
    ):
        return SimpleNamespace(
            name=name,
            full_name=full_name,
            display_name=display_name,
            full_display_name=full_display_name,
            parent=parent,
            all_jobs=all_jobs,
        )

    return _create


@pytest.fixture
def make_job():
    """Factory for duck-typed jobs with ``(display, full display)`` builds."""

    def _create(*builds):
        return SimpleNamespace(
            builds=[
                SimpleNamespace(display_name=display, full_display_name=full)
                for display, full in builds
            ]
        )

    return _create


@pytest.fixture
def mock_logger_factory():
    """Logger factory whose loggers are mocks."""
    factory = Mock()
    factory.create_logger.return_value = Mock()
    return factory


"""Tests for MatchingTestGenerator: pytest stubs mirroring the generated class."""

import os

import pytest

from conftest import read
from dpgen.generate.generation_request import EntityKind
from dpgen.generate.matching_test_generator import MatchingTestGenerator, snake_case
from dpgen.generate.name_resolver import NameResolver


def _target(base, name, kind=EntityKind.REPOSITORY):
    return NameResolver(kind, str(base)).resolve(name)


@pytest.mark.unit
class TestSnakeCase:

    @pytest.mark.parametrize("name,expected", [
        ("User", "user"),
        ("UserRepository", "user_repository"),
        ("HTTPClient", "http_client"),
        ("Billing2Service", "billing2_service"),
    ])
    def test_snake_case(self, name, expected):
        assert snake_case(name) == expected


@pytest.mark.unit
class TestMatchingTestGenerator:

    def test_writes_test_mirroring_namespace(self, tmp_path):
        target = _target(tmp_path, "Admin.UserRepository")
        result = MatchingTestGenerator(str(tmp_path)).generate(target, EntityKind.REPOSITORY)
        expected = os.path.join(str(tmp_path), "tests", "Repositories", "Admin", "test_user_repository.py")
        assert result.created is True
        assert result.path == expected
        content = read(expected)
        assert "from app.Repositories.Admin.UserRepository import UserRepository" in content
        assert "class TestUserRepository:" in content
        assert "def test_repository_can_be_imported(self):" in content

    def test_service_test(self, tmp_path):
        target = _target(tmp_path, "Billing", EntityKind.SERVICE)
        result = MatchingTestGenerator(str(tmp_path), tests_dir="checks").generate(target, EntityKind.SERVICE)
        assert result.path == os.path.join(str(tmp_path), "checks", "Services", "test_billing.py")
        assert "def test_service_can_be_imported(self):" in read(result.path)

    def test_existing_test_is_not_overwritten(self, tmp_path):
        path = tmp_path / "tests" / "Repositories" / "test_user.py"
        path.parent.mkdir(parents=True)
        path.write_text("mine")
        result = MatchingTestGenerator(str(tmp_path)).generate(_target(tmp_path, "User"), EntityKind.REPOSITORY)
        assert result.created is False
        assert path.read_text() == "mine"

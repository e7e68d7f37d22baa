import pytest

from stashapi.uris.base import BuildError
from stashapi.uris.resource import ResourceUriBuilder

TEST_HOST = "stash.test.com"
TEST_PROJECT = "RRJ"
ROOT = "http://stash.test.com/rest/api/1.0"
BASE_URI = f"{ROOT}/projects/{TEST_PROJECT}"


def builder():
    return ResourceUriBuilder().host(TEST_HOST).projects().project(TEST_PROJECT)


def test_project_resource_uri_works():
    assert ResourceUriBuilder().host(TEST_HOST).projects().build() == f"{ROOT}/projects"


def test_with_project_uri_works():
    assert builder().build() == BASE_URI


def test_with_project_avatar_works():
    assert builder().avatar().build() == f"{BASE_URI}/avatar.png"


def test_project_permissions_uri_works():
    assert builder().permissions().build() == f"{BASE_URI}/permissions"


def test_project_group_permissions_uri_works():
    assert builder().permissions().groups().build() == f"{BASE_URI}/permissions/groups"


def test_project_user_permissions_uri_works():
    assert builder().permissions().users().build() == f"{BASE_URI}/permissions/users"


def test_with_project_permission_uri_works():
    uri = builder().permissions().permission("REPO_READ").build()
    assert uri == f"{BASE_URI}/permissions/REPO_READ"


def test_with_project_permission_all_uri_works():
    uri = builder().permissions().permission("REPO_READ").all().build()
    assert uri == f"{BASE_URI}/permissions/REPO_READ/all"


def test_project_repos_uri_works():
    assert builder().repos().repository("REPO").build() == f"{BASE_URI}/repos/REPO"


def test_project_without_host_fails():
    with pytest.raises(BuildError):
        ResourceUriBuilder().projects().project(TEST_PROJECT).avatar().build()
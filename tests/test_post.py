import json

from stashapi.models.post import (
    Project,
    PullRequest,
    PullRequestMember,
    PullRequestRef,
    PullRequestRefRepo,
    PullRequestRefRepoProject,
    User,
)


def _ref(branch):
    return PullRequestRef(
        id=branch,
        repository=PullRequestRefRepo(
            slug="my-repo", project=PullRequestRefRepoProject(key="my-project")
        ),
    )


def _pull_request(reviewers=()):
    return PullRequest(
        title="PR-title",
        description="PR-description",
        from_ref=_ref("featureBranch"),
        to_ref=_ref("master"),
        close_source_branch=False,
        reviewers=list(reviewers),
    )


def test_project_to_dict_keeps_nulls():
    project = Project(
        key="PTP", name="Post-Test-Project", description="This is a test project, please ignore"
    )
    assert project.to_dict() == {
        "key": "PTP",
        "name": "Post-Test-Project",
        "description": "This is a test project, please ignore",
        "avatar": None,
    }


def test_project_serializes_null_avatar():
    encoded = json.dumps(Project(key="PTP", name="Post-Test-Project").to_dict())
    assert json.loads(encoded)["avatar"] is None
    assert '"avatar": null' in encoded


def test_pull_request_to_dict():
    repo = {"slug": "my-repo", "name": None, "project": {"key": "my-project"}}
    assert _pull_request().to_dict() == {
        "title": "PR-title",
        "description": "PR-description",
        "fromRef": {"id": "featureBranch", "repository": repo},
        "toRef": {"id": "master", "repository": repo},
        "close_source_branch": False,
        "reviewers": [],
    }


def test_pull_request_key_order():
    assert list(_pull_request().to_dict()) == [
        "title",
        "description",
        "fromRef",
        "toRef",
        "close_source_branch",
        "reviewers",
    ]


def test_reviewers_serialized():
    payload = _pull_request([PullRequestMember(User("jdoe")), PullRequestMember(User("asmith"))])
    assert payload.to_dict()["reviewers"] == [{"user": {"name": "jdoe"}}, {"user": {"name": "asmith"}}]


def test_json_round_trip():
    payload = _pull_request([PullRequestMember(User("jdoe"))]).to_dict()
    assert json.loads(json.dumps(payload)) == payload


def test_ref_repo_name_included_when_set():
    repo = PullRequestRefRepo(
        slug="my-repo", name="My repo", project=PullRequestRefRepoProject("my-project")
    )
    assert repo.to_dict()["name"] == "My repo"


def test_defaults():
    payload = PullRequest(title="t", from_ref=_ref("a"), to_ref=_ref("b"))
    data = payload.to_dict()
    assert data["description"] is None
    assert data["close_source_branch"] is False
    assert data["reviewers"] == []
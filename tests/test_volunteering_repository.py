import pytest

from civicdesk.volunteering.models import NO_DEPARTMENT, Department, Volunteer
from civicdesk.volunteering.repository import Repository, RepositoryError


@pytest.fixture
def files(tmp_path):
    departments = tmp_path / "departments.txt"
    volunteers = tmp_path / "volunteers.txt"
    departments.write_text("Kitchen;Cooking meals\nGarden;Planting trees\n", encoding="utf-8")
    volunteers.write_text(
        "Ana;ana@example.com;cooking,music;Kitchen\n"
        "Bo;bo@example.com;trees;No department\n",
        encoding="utf-8",
    )
    return departments, volunteers


def test_loads_departments_and_volunteers(files):
    repository = Repository(*files)
    assert repository.departments == [
        Department("Kitchen", "Cooking meals"),
        Department("Garden", "Planting trees"),
    ]
    assert [volunteer.name for volunteer in repository.volunteers] == ["Ana", "Bo"]
    assert repository.volunteers[1].department == NO_DEPARTMENT


def test_missing_file_raises(tmp_path, files):
    with pytest.raises(RepositoryError, match="volunteers file"):
        Repository(files[0], tmp_path / "absent.txt")


def test_add_volunteer_persists(files):
    repository = Repository(*files)
    repository.add_volunteer(Volunteer("Cy", "cy@example.com", ["art"]))
    reloaded = Repository(*files)
    assert reloaded.volunteers == repository.volunteers
    assert reloaded.volunteers[-1].interests == ["art"]


def test_add_duplicate_volunteer_raises(files):
    repository = Repository(*files)
    with pytest.raises(RepositoryError, match="already exists"):
        repository.add_volunteer(Volunteer("Ana", "ana@example.com", ["other"]))
    assert len(repository.volunteers) == 2


def test_assign_volunteer_replaces_and_persists(files):
    repository = Repository(*files)
    repository.assign_volunteer(Volunteer("Bo", "bo@example.com", ["trees"], "Garden"))
    assert repository.volunteers[1].department == "Garden"
    reloaded = Repository(*files)
    assert reloaded.volunteers[1].department == "Garden"


def test_assign_unknown_volunteer_raises(files):
    repository = Repository(*files)
    with pytest.raises(RepositoryError):
        repository.assign_volunteer(Volunteer("Zed", "zed@example.com", [], "Garden"))
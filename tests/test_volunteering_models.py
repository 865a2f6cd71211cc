import pytest

from civicdesk.volunteering.models import NO_DEPARTMENT, Department, Volunteer


def test_department_parse_trims_fields():
    department = Department.parse("  Kitchen ;  Cooking meals  ")
    assert department == Department("Kitchen", "Cooking meals")


@pytest.mark.parametrize("line", ["Kitchen", "a;b;c", ""])
def test_department_parse_rejects_wrong_field_count(line):
    with pytest.raises(ValueError):
        Department.parse(line)


def test_volunteer_parse_reads_all_fields():
    volunteer = Volunteer.parse("Ana ; ana@example.com ; art, music ; Kitchen")
    assert volunteer.name == "Ana"
    assert volunteer.email == "ana@example.com"
    assert volunteer.interests == ["art", "music"]
    assert volunteer.department == "Kitchen"


def test_volunteer_format_round_trip():
    volunteer = Volunteer("Ana", "ana@example.com", ["art", "music"], "Kitchen")
    line = volunteer.format()
    assert line == "Ana;ana@example.com;art,music;Kitchen"
    parsed = Volunteer.parse(line)
    assert parsed.interests == volunteer.interests
    assert parsed.department == volunteer.department
    assert parsed == volunteer


def test_volunteer_without_interests_round_trips():
    volunteer = Volunteer("Bo", "bo@example.com")
    parsed = Volunteer.parse(volunteer.format())
    assert parsed.interests == []
    assert parsed.department == NO_DEPARTMENT


def test_volunteer_default_department():
    assert Volunteer("Bo", "bo@example.com").department == "No department"


def test_volunteer_equality_ignores_interests_and_department():
    first = Volunteer("Ana", "ana@example.com", ["art"], "Kitchen")
    second = Volunteer("Ana", "ana@example.com", ["sport"], NO_DEPARTMENT)
    other = Volunteer("Ana", "other@example.com", ["art"], "Kitchen")
    assert first == second
    assert first != other


def test_volunteer_parse_rejects_wrong_field_count():
    with pytest.raises(ValueError):
        Volunteer.parse("Ana;ana@example.com;art")
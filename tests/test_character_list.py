from models.character import CharacterRecord
from views.components.character_list import character_lines, format_character_line


def test_format_character_line():
    person = CharacterRecord(name="Luke Skywalker", birth_year="19BBY")
    assert format_character_line(person) == "Name: Luke Skywalker, birth_year 19BBY"


def test_character_lines_in_input_order(people):
    assert character_lines(people) == [
        "Name: Luke Skywalker, birth_year 19BBY",
        "Name: C-3PO, birth_year 112BBY",
    ]


def test_character_lines_keeps_duplicates(people):
    lines = character_lines(people + people[:1])
    assert len(lines) == 3
    assert lines[0] == lines[2]


def test_character_lines_empty():
    assert character_lines([]) == []


def test_fields_are_not_transformed():
    person = CharacterRecord(name="  beru whitesun lars ", birth_year="unknown")
    assert format_character_line(person) == "Name:   beru whitesun lars , birth_year unknown"

import pytest

from farsapy.option import Option, OptionType


def test_bool_option_format_exact():
    option = Option("flag", OptionType.BOOL, True, "A flag.")
    assert option.format() == (
        "Name        : flag\n"
        "Type        : bool\n"
        "Value       : true\n"
        "Description : A flag.\n"
    )


def test_bool_option_false_after_modification():
    option = Option("flag", OptionType.BOOL, True, "A flag.")
    option.value = False
    assert "Value       : false\n" in option.format()
    assert "Value       : true\n" not in option.format()


def test_double_option_format_contains_bounds():
    option = Option("step", OptionType.DOUBLE, 1.0, "Step.", 0.0, 2.0)
    text = option.format()
    lines = text.splitlines()
    assert lines[0] == "Name        : step"
    assert lines[1] == "Type        : double"
    assert lines[2] == "Value       : +1.000000e+00"
    assert lines[3].startswith("Lower bound : ")
    assert lines[4].startswith("Upper bound : ")
    assert lines[5] == "Description : Step."
    assert len(lines) == 6


def test_integer_option_format():
    option = Option("limit", OptionType.INTEGER, 5, "Limit.", 0, 10)
    lines = option.format().splitlines()
    assert lines[1] == "Type        : integer"
    assert lines[2] == "Value       : 5"
    assert lines[3] == "Lower bound : 0"
    assert lines[4] == "Upper bound : 10"


def test_string_option_format_has_no_bounds():
    option = Option("mode", OptionType.STRING, "fast", "Mode.")
    text = option.format()
    assert "Value       : fast\n" in text
    assert "Lower bound" not in text
    assert "Upper bound" not in text
    assert text.endswith("Description : Mode.\n")


@pytest.mark.parametrize(
    "kind, value, lower, upper",
    [
        (OptionType.BOOL, False, None, None),
        (OptionType.DOUBLE, 0.5, 0.0, 1.0),
        (OptionType.INTEGER, 3, 1, 4),
        (OptionType.STRING, "abc", None, None),
    ],
)
def test_format_starts_with_name_and_ends_with_description(kind, value, lower, upper):
    option = Option("opt", kind, value, "Desc.", lower, upper)
    text = option.format()
    assert text.startswith("Name        : opt\n")
    assert text.endswith("Description : Desc.\n")
    assert f"Type        : {kind.value}\n" in text


def test_option_type_lookup_by_string():
    assert OptionType("integer") is OptionType.INTEGER
    assert str(OptionType.STRING) == "string"
    with pytest.raises(ValueError):
        OptionType("float")
from __future__ import annotations

from voter_browser.core.voter import VOTER_COLUMNS
from voter_browser.importing import parse_voter_csv, placeholder_picture


def test_headers_are_case_and_whitespace_insensitive():
    text = "Voter ID,NAME,Parent Name,Age\nKV1-1,Ram Shrestha,Hari Shrestha,40\n"

    parsed = parse_voter_csv(text)

    assert parsed.count == 1
    row = parsed.frame.iloc[0]
    assert row["voter_id"] == "KV1-1"
    assert row["parent_name"] == "Hari Shrestha"
    assert row["age"] == 40
    assert list(parsed.frame.columns) == VOTER_COLUMNS


def test_short_rows_and_blank_lines():
    text = "\n\nvoter_id,name,gender,ward\n\nKV1-1,Ram\n   \nKV1-2,Sita,Female,Ward 3,extra\n"

    parsed = parse_voter_csv(text)

    assert parsed.frame["voter_id"].tolist() == ["KV1-1", "KV1-2"]
    assert parsed.frame["gender"].tolist() == ["", "Female"]
    assert parsed.frame["ward"].tolist() == ["", "Ward 3"]


def test_age_takes_leading_integer_or_zero():
    text = "voter_id,name,age\nA,One,35 years\nB,Two,abc\nC,Three,\nD,Four, 41\n"

    parsed = parse_voter_csv(text)

    assert parsed.frame["age"].tolist() == [35, 0, 0, 41]


def test_rows_without_id_or_name_are_dropped():
    text = "voter_id,name\nA,One\n,Nameless\nB,\nC,Three\n"

    parsed = parse_voter_csv(text)

    assert parsed.frame["voter_id"].tolist() == ["A", "C"]
    assert parsed.dropped == 2


def test_header_only_or_empty_text_gives_nothing():
    assert parse_voter_csv("voter_id,name\n").count == 0
    assert parse_voter_csv("").count == 0
    assert parse_voter_csv("   \n  ").dropped == 0


def test_missing_picture_gets_placeholder():
    text = "voter_id,name,picture\nA,Ram Shrestha,\nB,Sita,http://example.org/s.png\n"

    parsed = parse_voter_csv(text)

    assert parsed.frame["picture"].tolist() == [
        placeholder_picture("Ram Shrestha"),
        "http://example.org/s.png",
    ]
    assert "seed=Ram%20Shrestha" in placeholder_picture("Ram Shrestha")


def test_alternate_delimiter_and_unknown_columns():
    text = "voter_id;name;constituency;booth\nA;Ram;Kathmandu-1;Booth 2\n"

    parsed = parse_voter_csv(text, delimiter=";")

    assert parsed.frame["booth"].tolist() == ["Booth 2"]
    assert "constituency" not in parsed.frame.columns


def test_no_quoting_support():
    text = 'voter_id,name,municipality\nA,"Shrestha, Ram",Kirtipur\n'

    parsed = parse_voter_csv(text)

    # The comma inside quotes splits the field; municipality gets the tail
    assert parsed.frame["name"].tolist() == ['"Shrestha']
    assert parsed.frame["municipality"].tolist() == ['Ram"']


def test_repeated_header_keeps_last_column():
    parsed = parse_voter_csv("voter_id,name,name\nA,First,Second\n")

    assert parsed.frame["name"].tolist() == ["Second"]

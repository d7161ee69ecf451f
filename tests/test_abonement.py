from abonements.abonement import Abonement


def test_default_record_is_empty():
    record = Abonement()
    assert (record.name, record.kind, record.end_date) == ("", "", "")


def test_to_csv_joins_fields_with_commas():
    record = Abonement("Anna", "Gold", "2024-05-01")
    assert record.to_csv() == "Anna,Gold,2024-05-01"


def test_from_csv_parses_three_fields():
    record = Abonement.from_csv("Boris,Silver,2025-12-31")
    assert record == Abonement("Boris", "Silver", "2025-12-31")


def test_round_trip():
    record = Abonement("Vera", "Platinum", "2030-01-15")
    assert Abonement.from_csv(record.to_csv()) == record


def test_from_csv_keeps_whitespace():
    record = Abonement.from_csv(" Anna , Gold , 2024-05-01 ")
    assert record.name == " Anna "
    assert record.end_date == " 2024-05-01 "


def test_from_csv_wrong_field_count_gives_empty_record():
    assert Abonement.from_csv("Anna,Gold") == Abonement()
    assert Abonement.from_csv("Anna,Gold,2024-05-01,extra") == Abonement()
    assert Abonement.from_csv("") == Abonement()


def test_fields_are_mutable():
    record = Abonement("Anna", "Gold", "2024-05-01")
    record.kind = "Silver"
    assert record.to_csv() == "Anna,Silver,2024-05-01"
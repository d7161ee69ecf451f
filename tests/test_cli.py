import pytest

from abonements.abonement import Abonement
from abonements.cli import main
from abonements.model import AbonementModel


def _records(path):
    model = AbonementModel()
    model.load_from_file(path)
    return model.all_abonements()


def test_add_creates_file(tmp_path):
    path = tmp_path / "data.csv"
    assert main(["add", str(path), "Anna", "Gold", "2024-05-01"]) == 0
    assert _records(path) == [Abonement("Anna", "Gold", "2024-05-01")]


def test_add_appends(tmp_path):
    path = tmp_path / "data.csv"
    main(["add", str(path), "Anna", "Gold", "2024-05-01"])
    main(["add", str(path), "Ivanov, Ivan", "Silver", "2025-01-31"])
    assert _records(path) == [
        Abonement("Anna", "Gold", "2024-05-01"),
        Abonement("Ivanov, Ivan", "Silver", "2025-01-31"),
    ]


def test_add_rejects_invalid_entry(tmp_path, capsys):
    path = tmp_path / "data.csv"
    assert main(["add", str(path), "Anna", "Bronze", "2024-05-01"]) == 1
    assert "Тип должен быть Gold, Silver или Platinum." in capsys.readouterr().err
    assert not path.exists()


def test_list_prints_table(tmp_path, capsys):
    path = tmp_path / "data.csv"
    main(["add", str(path), "Anna", "Gold", "2024-05-01"])
    assert main(["list", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\t".join(["#", "Имя", "Тип", "Срок действия"])
    assert lines[1] == "\t".join(["1", "Anna", "Gold", "2024-05-01"])


def test_list_missing_file(tmp_path, capsys):
    assert main(["list", str(tmp_path / "missing.csv")]) == 1
    assert "Ошибка при загрузке файла" in capsys.readouterr().err


def test_remove_row(tmp_path):
    path = tmp_path / "data.csv"
    main(["add", str(path), "Anna", "Gold", "2024-05-01"])
    main(["add", str(path), "Boris", "Platinum", "2025-12-31"])
    assert main(["remove", str(path), "1"]) == 0
    assert _records(path) == [Abonement("Boris", "Platinum", "2025-12-31")]


@pytest.mark.parametrize("row", ["0", "2"])
def test_remove_bad_row(tmp_path, capsys, row):
    path = tmp_path / "data.csv"
    main(["add", str(path), "Anna", "Gold", "2024-05-01"])
    assert main(["remove", str(path), row]) == 1
    assert "Сначала выберите строку для удаления" in capsys.readouterr().err
    assert len(_records(path)) == 1


def test_missing_command_exits_with_usage():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2
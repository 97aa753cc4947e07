import pytest

from questiondraw.store import (
    DIFFICULT_LABEL,
    SIMPLE_LABEL,
    ProjectStore,
    QuestionBanks,
    StoreError,
    format_bank_line,
    parse_bank_line,
)


@pytest.fixture
def store(tmp_path):
    return ProjectStore(tmp_path / "project")


def test_add_writes_name_and_two_full_banks(store):
    store.add("g1")
    lines = store.path_for("g1").read_text(encoding="utf-8").split("\n")
    assert len(lines) == 3
    assert lines[0] == "g1"
    assert lines[1].startswith("简单题,1,2,3,")
    assert lines[2].startswith("困难题,1,2,3,")
    assert store.load_banks("g1") == QuestionBanks.fresh()


def test_add_creates_missing_folder(tmp_path):
    store = ProjectStore(tmp_path / "a" / "b")
    store.add("x")
    assert store.path_for("x").is_file()


def test_add_rejects_empty_name(store):
    with pytest.raises(StoreError):
        store.add("")


def test_list_projects_sorted_and_filtered(store):
    for name in ["b", "A", "c"]:
        store.add(name)
    (store.root / "notes.md").write_text("x", encoding="utf-8")
    assert store.list_projects() == ["A", "b", "c"]


def test_list_projects_creates_folder(store):
    assert store.list_projects() == []
    assert store.root.is_dir()


def test_delete_and_missing_delete(store):
    store.add("g1")
    store.delete("g1")
    assert not store.path_for("g1").exists()
    with pytest.raises(StoreError):
        store.delete("g1")


def test_delete_all(store):
    store.add("one")
    store.add("two")
    store.delete_all()
    assert store.list_projects() == []


def test_reset_restores_full_banks(store):
    store.add("g1")
    banks = QuestionBanks.fresh()
    banks.simple[4] = 0
    banks.difficult[0] = 0
    store.save_banks("g1", banks)
    store.reset("g1")
    assert store.load_banks("g1") == QuestionBanks.fresh()


def test_reset_all(store):
    drained = QuestionBanks([0] * 30, [0] * 30)
    for name in ["one", "two"]:
        store.add(name)
        store.save_banks(name, drained)
    store.reset_all()
    assert all(store.load_banks(n) == QuestionBanks.fresh() for n in ["one", "two"])


def test_reset_without_folder_fails(store):
    with pytest.raises(StoreError):
        store.reset("g1")


def test_save_banks_round_trip_keeps_first_line(store):
    store.add("g1")
    banks = QuestionBanks.fresh()
    banks.simple[2] = 0
    banks.difficult[29] = 0
    store.save_banks("g1", banks)
    text = store.path_for("g1").read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert text.split("\n")[0] == "g1"
    assert store.load_banks("g1") == banks


def test_save_banks_missing_project(store):
    with pytest.raises(StoreError):
        store.save_banks("ghost", QuestionBanks.fresh())


def test_load_banks_short_file(store):
    store.root.mkdir(parents=True)
    store.path_for("g1").write_text("g1\n", encoding="utf-8")
    with pytest.raises(StoreError):
        store.load_banks("g1")


def test_parse_non_numeric_reads_zero():
    values = ["x"] + [str(n) for n in range(2, 31)]
    parsed = parse_bank_line(SIMPLE_LABEL + "," + ",".join(values))
    assert parsed[0] == 0
    assert parsed[1:] == list(range(2, 31))


def test_parse_short_line_raises():
    with pytest.raises(StoreError):
        parse_bank_line("简单题,1,2,3")


def test_format_parse_round_trip():
    values = list(range(1, 31))
    values[7] = 0
    assert parse_bank_line(format_bank_line(DIFFICULT_LABEL, values)) == values


def test_format_bank_line_shape():
    assert format_bank_line("简单题", [1, 2]) == "简单题,1,2"


def test_question_banks_wrong_length():
    with pytest.raises(ValueError):
        QuestionBanks([1, 2], list(range(1, 31)))
import pytest

from turbine.structs import CodeStruct, StructTable


def test_push_assigns_sequential_ids():
    table = StructTable()
    first = table.push("_main.Point", 2)
    second = table.push("_main.Line", 4)
    assert (first, second) == (0, 1)
    assert len(table) == 2


def test_lookup_returns_pushed_struct():
    table = StructTable()
    sid = table.push("_main.Point", 2)
    strct = table.lookup(sid)
    assert strct.id == sid
    assert strct.fullname == "_main.Point"
    assert strct.field_count == 2


def test_lookup_out_of_range_returns_none():
    table = StructTable()
    table.push("_main.Point", 2)
    assert table.lookup(-1) is None
    assert table.lookup(1) is None


def test_iteration_follows_ids():
    table = StructTable()
    names = ["a.A", "a.B", "a.C"]
    for name in names:
        table.push(name, 0)
    assert [s.fullname for s in table] == names
    assert [s.id for s in table] == list(range(len(names)))


def test_value_types_round_trip():
    strct = CodeStruct(0, 3, "m.S")
    for val_type in (3, 1, 7):
        strct.push_value_type(val_type)
    assert [strct.value_type(i) for i in range(3)] == [3, 1, 7]


def test_value_type_out_of_range_raises():
    strct = CodeStruct(0, 1, "m.S")
    strct.push_value_type(2)
    with pytest.raises(IndexError):
        strct.value_type(1)
    with pytest.raises(IndexError):
        strct.value_type(-1)


def test_structs_do_not_share_value_types():
    table = StructTable()
    a = table.lookup(table.push("m.A", 1))
    b = table.lookup(table.push("m.B", 1))
    a.push_value_type(5)
    with pytest.raises(IndexError):
        b.value_type(0)
import pytest

from mjrs_utils.views import create_views, iter_view_lines

XMACRO = (
    "#define MJMODEL_BODY                    \\\n"
    "  X( int,     body_, parentid, nbody, 1 ) \\\n"
    "  X( mjtNum,  body_, pos,      nbody, 3 )\n"
    "\n"
    "#define MJDATA_BODY                     \\\n"
    "  X( mjtNum,  x,     pos,      nbody, 3 )\n"
)


def test_header_line_names_class_and_item():
    lines = list(iter_view_lines(XMACRO))
    assert lines[0] == "model: BODY"
    assert lines[3].startswith("data:")


def test_number_of_lines():
    assert len(list(iter_view_lines(XMACRO))) == 5


def test_multi_dimensional_entry():
    lines = list(iter_view_lines(XMACRO))
    assert lines[2] == "      let pos = (id * 3, 3);"
    assert lines[4] == lines[2]


def test_single_dimensional_entry_uses_mapping():
    line = list(iter_view_lines(XMACRO))[1]
    assert line.startswith("      let parentid = mj_view_indices!(id, ")
    assert "mj_model_nx_to_mapping!(model_ffi, nbody)" in line
    assert "mj_model_nx_to_nitem!(model_ffi, nbody)" in line
    assert line.endswith("model_ffi.nbody);")


def test_entries_with_wrong_field_count_are_ignored():
    lines = list(iter_view_lines("#define MJMODEL_X \\\n  X( a, b )\n"))
    assert lines == ["model: X"]


def test_text_without_defines_yields_nothing():
    assert list(iter_view_lines("int x = (1);\n")) == []


def test_create_views_prints_lines(tmp_path, capsys):
    path = tmp_path / "indexer_xmacro.h"
    path.write_text(XMACRO)
    create_views(path)
    expected = "".join(f"{line}\n" for line in iter_view_lines(XMACRO))
    assert capsys.readouterr().out == expected


def test_create_views_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_views(tmp_path / "missing.h")
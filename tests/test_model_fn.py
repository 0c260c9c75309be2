import pytest

from mjrs_utils.casing import rust_type, to_pascal_case
from mjrs_utils.model_fn import (
    create_mj_self_methods,
    iter_mj_self_methods,
    process_arguments,
)

HEADER = (
    "// Advance simulation.\n"
    "MJAPI void mj_step(const mjModel* m, mjData* d);\n\n"
    "// Print model.\n"
    "MJAPI void mj_printModel(const mjModel* m, const char* filename);\n\n"
    "// Compute total mass.\n"
    "MJAPI mjtNum mj_getTotalmass(const mjModel* m);\n"
)


def test_process_arguments_const_self():
    result = process_arguments("const mjModel* m, mjData* d, int n", "mjModel", [])
    assert result == (
        ["&self", "d: &mut MjData", "n: std::ffi::c_int"],
        ["self.ffi()", "d", "n"],
    )


def test_process_arguments_mutable_self():
    assert process_arguments("mjData* d", "mjData", []) == (["&mut self"], ["self.ffi_mut()"])


def test_process_arguments_pointer_in_name():
    params, names = process_arguments("mjData* d, mjtNum *res", "mjData", [])
    assert params[1] == "res: &mut " + to_pascal_case("mjtNum")
    assert names[1] == "res"


def test_process_arguments_const_c_pointer():
    params, names = process_arguments("mjData* d, const double* x", "mjData", [])
    assert params[-1] == "x: &" + rust_type("double")
    assert names == ["self.ffi_mut()", "x"]


def test_process_arguments_array():
    params, names = process_arguments("mjData* d, const mjtNum vec[3]", "mjData", [])
    assert names[1] == "vec.as_ptr()"
    assert params[1] == "vec: &[" + to_pascal_case("mjtNum") + "; 3]"


def test_process_arguments_blacklist():
    assert process_arguments("const mjModel* m, mjvScene* scn", "mjModel", ["mjvScene"]) is None


def test_process_arguments_void_array():
    assert process_arguments("mjData* d, void buf[4]", "mjData", []) is None


def test_process_arguments_empty_parameter_raises():
    with pytest.raises(ValueError):
        process_arguments("mjData* d,", "mjData", [])


def test_methods_for_mjdata():
    blocks = list(iter_mj_self_methods(HEADER, "mjData", []))
    assert blocks == [
        "\n/// Advance simulation.\n"
        "pub fn step(&mut self, m: &MjModel) {\n"
        "    unsafe { mj_step(m, self.ffi_mut()) }\n"
        "}"
    ]


def test_methods_for_mjmodel():
    blocks = list(iter_mj_self_methods(HEADER, "mjModel", []))
    assert len(blocks) == 3
    assert all("(&self" in block for block in blocks)
    assert all("self.ffi()" in block for block in blocks)
    assert "-> " + to_pascal_case("mjtNum") in blocks[2]
    assert "&" + rust_type("char") in blocks[1]


def test_methods_blacklist_filters():
    blocks = list(iter_mj_self_methods(HEADER, "mjModel", ["char"]))
    assert len(blocks) == 2
    assert not any("mj_printModel(" in block for block in blocks)


def test_create_prints_methods(tmp_path, capsys):
    path = tmp_path / "mujoco.h"
    path.write_text(HEADER)
    create_mj_self_methods(path, "mjModel", [])
    expected = "".join(f"{block}\n" for block in iter_mj_self_methods(HEADER, "mjModel", []))
    assert capsys.readouterr().out == expected
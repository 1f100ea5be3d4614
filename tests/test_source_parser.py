import pytest

from scriptdoc.source_parser import (
    ScriptFunction,
    ScriptParameter,
    extract_params,
    extract_return_types,
    map_scr_add_to_type,
    parse,
    parse_category_file,
    parse_gsc_cpp,
)

GSC_CPP = """\
scr_function_t scriptFunctions[] = {
    {"getX", gsc_utils_getx, 0},
    // {"old", gsc_utils_old, 0},
    {"testthing", gsc_utils_testthing, 0},
    {"noprefix", other_fn, 0},
    {"sqrt", gsc_math_sqrt, 0},
};
scr_method_t scriptMethods[] = {
    {"getName", gsc_player_getname, 0},
};
"""

UTILS_CPP = """\
void gsc_utils_getx()
{
    int a;
    char *b;
    if (!stackGetParams("is", &a, &b)) {
        return;
    }
    Scr_AddInt(a);
}
"""

MATH_CPP = """\
void gsc_math_sqrt() // square root
{
    float x;
    stackGetParams("f", &x);
    Scr_AddFloat(x);
}
"""

PLAYER_CPP = """\
void gsc_player_getname(scr_entref_t ref)
{
    Scr_AddString("x");
}
"""


@pytest.fixture
def root(tmp_path):
    gsc = tmp_path / "src" / "gsc"
    gsc.mkdir(parents=True)
    (gsc / "gsc.cpp").write_text(GSC_CPP)
    (gsc / "gsc_utils.cpp").write_text(UTILS_CPP)
    (gsc / "gsc_math.cpp").write_text(MATH_CPP)
    (gsc / "gsc_player.cpp").write_text(PLAYER_CPP)
    return tmp_path


def test_map_scr_add_known_and_unknown():
    assert map_scr_add_to_type("Scr_AddBool") == "bool"
    assert map_scr_add_to_type("Scr_AddObject") == "object"
    assert map_scr_add_to_type("Scr_AddUndefined") is None


def test_extract_params_maps_types_and_strips_ampersand():
    params = extract_params('stackGetParams("is", &a, &b)')
    assert params == [ScriptParameter("int", "a"), ScriptParameter("string", "b")]


def test_extract_params_unknown_letter_and_truncation():
    params = extract_params('stackGetParams("xcl", &p, &q)')
    assert params == [
        ScriptParameter("unknown", "p"),
        ScriptParameter("const string", "q"),
    ]


def test_extract_params_without_call():
    assert extract_params("return;") == [ScriptParameter("unknown", "unknown")]


def test_extract_return_types_distinct():
    body = "Scr_AddInt(1); Scr_AddInt(2); Scr_AddString (s); Scr_AddUndefined();"
    assert sorted(extract_return_types(body)) == ["int", "string"]


def test_extract_return_types_defaults_to_unknown():
    assert extract_return_types("Scr_AddUndefined();") == ["unknown"]


def test_parse_gsc_cpp_tables(root):
    functions, methods = parse_gsc_cpp(root / "src" / "gsc" / "gsc.cpp")
    assert sorted(functions) == ["math", "utils"]
    assert [f.script_name for f in functions["utils"]] == ["getX"]
    assert functions["math"][0].name == "gsc_math_sqrt"
    assert [m.name for m in methods["player"]] == ["gsc_player_getname"]


def test_parse_category_file_handles_nested_braces(root):
    details = parse_category_file(root / "src" / "gsc" / "gsc_utils.cpp")
    assert list(details) == ["gsc_utils_getx"]
    entry = details["gsc_utils_getx"]
    assert entry.params == [ScriptParameter("int", "a"), ScriptParameter("string", "b")]
    assert entry.returns == ["int"]


def test_parse_category_file_with_comment_after_signature(root):
    details = parse_category_file(root / "src" / "gsc" / "gsc_math.cpp")
    assert details["gsc_math_sqrt"].params == [ScriptParameter("float", "x")]
    assert details["gsc_math_sqrt"].returns == ["float"]


def test_parse_end_to_end(root):
    result = parse(root)
    assert list(result.functions) == ["math", "utils"]
    assert list(result.functions["utils"]) == ["gsc_utils_getx"]
    method = result.methods["player"]["getName"]
    assert method.params == [ScriptParameter("unknown", "unknown")]
    assert method.returns == ["string"]


def test_parse_missing_category_file(tmp_path):
    gsc = tmp_path / "src" / "gsc"
    gsc.mkdir(parents=True)
    (gsc / "gsc.cpp").write_text(GSC_CPP)
    with pytest.raises(FileNotFoundError):
        parse(tmp_path)


def test_to_dict_omits_internal_name():
    func = ScriptFunction(
        name="gsc_utils_getx",
        script_name="getX",
        params=[ScriptParameter("int", "a")],
        returns=["int"],
    )
    assert func.to_dict() == {
        "scriptName": "getX",
        "params": [{"param_type": "int", "param_name": "a"}],
        "returns": ["int"],
    }
from json_schema_to_rust.pipeline.analyzer import FieldDef, FieldKind, StructDef, emission_order


def struct(name, *refs):
    fields = [FieldDef(kind=kind, name=f"f{i}", json_key=f"f{i}", type_name=target) for i, (kind, target) in enumerate(refs)]
    return StructDef(name=name, fields=fields)


def test_dependencies_come_first():
    structs = {
        "A": struct("A", (FieldKind.ARRAY, "B")),
        "B": struct("B", (FieldKind.STRING, "String")),
        "Root": struct("Root", (FieldKind.OBJECT, "A"), (FieldKind.ADDITIONAL_PROPERTIES, "C")),
        "C": struct("C"),
    }
    assert emission_order(structs, "Root") == ["B", "A", "C", "Root"]


def test_unreachable_structs_follow_in_sorted_order():
    structs = {
        "Zed": struct("Zed"),
        "Root": struct("Root", (FieldKind.OBJECT, "Leaf")),
        "Leaf": struct("Leaf"),
        "Alpha": struct("Alpha"),
    }
    assert emission_order(structs, "Root") == ["Leaf", "Root", "Alpha", "Zed"]


def test_references_to_unknown_types_are_ignored():
    structs = {"Root": struct("Root", (FieldKind.OBJECT, "serde_json::Value"), (FieldKind.ARRAY, "u8"))}
    assert emission_order(structs, "Root") == ["Root"]


def test_enum_fields_are_not_followed():
    structs = {"Root": struct("Root", (FieldKind.ENUM, "Status")), "Status": struct("Status")}
    assert emission_order(structs, "Root") == ["Root", "Status"]


def test_each_struct_once_even_with_cycles():
    structs = {"A": struct("A", (FieldKind.OBJECT, "B")), "B": struct("B", (FieldKind.OBJECT, "A"))}
    assert emission_order(structs, "A") == ["B", "A"]


def test_missing_root():
    structs = {"B": struct("B"), "A": struct("A")}
    assert emission_order(structs, "Root") == ["A", "B"]

from probe.attributes import AttributeStore, LANG, SCHEMA_VERSION


def test_new_store_has_version_and_lang():
    store = AttributeStore()
    assert store.get("version") == SCHEMA_VERSION
    assert isinstance(store.get("version"), float)
    assert store.get("lang") == LANG == "python"
    assert "runtime" not in store


def test_set_overwrites_and_get_missing_is_none():
    store = AttributeStore()
    store.set("custom", "a")
    store.set("custom", 42)
    assert store.get("custom") == 42
    assert store.get("nope") is None


def test_as_dict_is_a_copy():
    store = AttributeStore()
    record = store.as_dict()
    record["version"] = "tampered"
    assert store.get("version") == SCHEMA_VERSION
    assert len(store) == 2

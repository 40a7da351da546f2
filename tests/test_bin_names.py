import sys
import os
import pytest

# Allow importing from bin/
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'bin'))
import iconfont_names
from iconfont_manifest import IconRecord


def record(identifier, label=None, code=0xe600):
    return IconRecord(identifier, label or identifier, code)


class TestCamelSplit:
    def test_split_pascal(self):
        assert iconfont_names.split_by_camel_case("AttentionLine") == ["Attention", "Line"]

    def test_split_acronym_kept(self):
        assert iconfont_names.split_by_camel_case("HTMLParser") == ["HTMLParser"]

    def test_split_lower(self):
        assert iconfont_names.split_by_camel_case("home") == ["home"]

    def test_split_empty(self):
        assert iconfont_names.split_by_camel_case("") == []


class TestToCamelCase:
    @pytest.mark.parametrize("label, expected", [
        ("home", "home"),
        ("user-circle", "userCircle"),
        ("arrow_left_bold", "arrowLeftBold"),
        ("AttentionLine", "attentionLine"),
        ("icon-AttentionLine", "iconAttentionLine"),
        ("Icon A", "iconA"),
        ("a--b__c", "aBC"),
        ("-leading-", "leading"),
        ("A", "a"),
        ("x", "x"),
        ("", "icon"),
        ("---", "icon"),
        ("123", "icon123"),
        ("3d-rotate", "icon3dRotate"),
        ("wifi.signal", "wifiSignal"),
        ("首页", "icon"),
    ])
    def test_normalize(self, label, expected):
        assert iconfont_names.to_camel_case(label) == expected

    @pytest.mark.parametrize("label", ["home", "userCircle", "arrowLeftBold", "iconA"])
    def test_fixed_point(self, label):
        once = iconfont_names.to_camel_case(label)
        assert once == label
        assert iconfont_names.to_camel_case(once) == once

    def test_outputs_are_valid_identifiers(self):
        for label in ["a b c", "1", "--", "x.y/z", "Ünïcødé"]:
            assert iconfont_names.is_valid_identifier(iconfont_names.to_camel_case(label))

    def test_fallback_used_for_invalid_result(self, monkeypatch):
        # Force the final check to fail to exercise the fallback path
        monkeypatch.setattr(iconfont_names, "is_valid_identifier", lambda name: False)
        names = iconfont_names.FallbackNames()
        assert iconfont_names.to_camel_case("home", names) == "iconFallback1"
        assert iconfont_names.to_camel_case("user", names) == "iconFallback2"


class TestFallbackNames:
    def test_unique_within_run(self):
        names = iconfont_names.FallbackNames()
        generated = [names.next_name() for _ in range(5)]
        assert len(set(generated)) == 5
        assert all(iconfont_names.is_valid_identifier(n) for n in generated)

    def test_runs_are_independent(self):
        assert iconfont_names.FallbackNames().next_name() == iconfont_names.FallbackNames().next_name()


class TestResolveCollisions:
    def test_no_collisions(self):
        resolved = iconfont_names.resolve_collisions([record("home"), record("user")])
        assert list(resolved) == ["home", "user"]

    def test_collision_numbering_starts_at_two(self):
        a = IconRecord("iconA", "icon-a", 1)
        b = IconRecord("iconA", "icon_a", 2)
        c = IconRecord("iconA", "Icon A", 3)
        resolved = iconfont_names.resolve_collisions([a, b, c])

        assert resolved["iconA"] is a
        assert resolved["iconA2"] is b
        assert resolved["iconA3"] is c
        assert "iconA1" not in resolved

    def test_group_of_n(self):
        records = [record("star", code=i) for i in range(6)]
        resolved = iconfont_names.resolve_collisions(records)
        assert sorted(resolved) == sorted(["star"] + [f"star{k}" for k in range(2, 7)])
        assert [r.code_point for r in resolved.values()] == list(range(6))

    def test_suffix_skips_existing_base(self):
        first = IconRecord("iconA", "icon-a", 1)
        second = IconRecord("iconA", "icon_a", 2)
        taken = IconRecord("iconA2", "icon-a2", 3)
        resolved = iconfont_names.resolve_collisions([first, second, taken])

        assert resolved["iconA2"] is taken
        assert resolved["iconA3"] is second
        assert len(resolved) == 3

    def test_records_unchanged(self):
        a = record("home")
        b = record("home")
        iconfont_names.resolve_collisions([a, b])
        assert b.identifier == "home"

    def test_sorted_constants(self):
        resolved = iconfont_names.resolve_collisions([record("zoom"), record("add"), record("add")])
        assert [name for name, _ in iconfont_names.sorted_constants(resolved)] == ["add", "add2", "zoom"]

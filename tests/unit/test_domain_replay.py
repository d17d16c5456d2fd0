"""Unit tests for the battle replay encoder."""

import base64
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from questcalc.domain.enums import Element, Rarity
from questcalc.domain.lineup import make_army_from_strings
from questcalc.domain.models import Army, Monster
from questcalc.domain.replay import (
    ReplayEncodingError,
    decode_battle_replay,
    get_replay_heroes,
    get_replay_monster_number,
    get_replay_setup,
    make_battle_replay,
)
from questcalc.domain.session import SessionContext
from questcalc.repository.catalog_store import load_catalog

CATALOG = load_catalog()
MONSTER_NAMES = [monster.name for monster in CATALOG.monster_base_list]
NOW = 1_700_000_000


def _army(session: SessionContext, *tokens: str) -> Army:
    army = make_army_from_strings(session, list(tokens))
    assert isinstance(army, Army)
    return army


class TestReplayMonsterNumber:
    def test_monsters_use_catalog_position(self, session, catalog):
        assert get_replay_monster_number(session, catalog.monster_map["a1"]) == 0
        assert get_replay_monster_number(session, catalog.monster_map["w5"]) == 19
        assert get_replay_monster_number(session, catalog.monster_map["w10"]) == 39

    def test_heroes_use_negative_offset(self, session, catalog):
        first = catalog.base_heroes[0].leveled(1)
        nebra = catalog.find_hero("nebra").leveled(30)
        last = catalog.base_heroes[-1].leveled(2)

        assert get_replay_monster_number(session, first) == -2
        assert get_replay_monster_number(session, nebra) == -4
        assert get_replay_monster_number(session, last) == -(len(catalog.base_heroes) + 1)

    def test_unknown_monster_is_an_error(self, session):
        stranger = Monster(base_name="zz9", name="zz9", element=Element.AIR)
        with pytest.raises(ReplayEncodingError):
            get_replay_monster_number(session, stranger)

    def test_unknown_hero_is_an_error(self, session):
        stranger = Monster(base_name="nobody", name="nobody:3", element=Element.AIR, rarity=Rarity.RARE, level=3)
        with pytest.raises(ReplayEncodingError):
            get_replay_monster_number(session, stranger)


class TestReplaySetup:
    def test_layout_is_reversed_and_padded(self, session):
        setup = get_replay_setup(session, _army(session, "a1", "e1", "nebra:10"))

        assert len(setup) == 30
        assert setup[:6] == [-4, 1, 0, -1, -1, -1]
        assert setup == setup[:6] * 5

    def test_empty_army(self, session):
        assert get_replay_setup(session, session.make_army()) == [-1] * 30

    def test_full_army(self, session):
        setup = get_replay_setup(session, _army(session, "a1", "e1", "f1", "w1", "a2", "e2"))
        assert setup[:6] == [5, 4, 3, 2, 1, 0]

    @given(names=st.lists(st.sampled_from(MONSTER_NAMES), min_size=0, max_size=6))
    def test_decoded_setup_matches_reversed_army(self, names):
        """Property: each block holds the army's indices in reverse order."""
        session = SessionContext(CATALOG)
        army = _army(session, *names) if names else session.make_army()

        payload = decode_battle_replay(make_battle_replay(session, army, army, now=lambda: NOW))

        expected = [MONSTER_NAMES.index(name) for name in reversed(names)]
        for line in range(5):
            block = payload.setup[line * 6 : (line + 1) * 6]
            assert block[: len(names)] == expected
            assert block[len(names) :] == [-1] * (6 - len(names))
        assert payload.player == payload.setup

    def test_inputs_are_not_mutated(self, session):
        army = _army(session, "a1", "tiny:2")
        before = list(army.monsters)

        make_battle_replay(session, army, army, now=lambda: NOW)

        assert army.monsters == before


class TestReplayHeroes:
    def test_levels_in_catalog_order(self, session, catalog):
        levels = get_replay_heroes(session, _army(session, "a1", "nebra:10", "ladyoftwilight:3"))

        assert len(levels) == len(catalog.base_heroes)
        assert levels[0] == 3
        assert levels[2] == 10
        assert sum(levels) == 13

    def test_first_occurrence_wins(self, session):
        levels = get_replay_heroes(session, _army(session, "tiny:4", "tiny:9"))
        assert levels[1] == 4

    def test_no_heroes(self, session, catalog):
        assert get_replay_heroes(session, _army(session, "a1")) == [0] * len(catalog.base_heroes)


class TestMakeBattleReplay:
    def test_exact_payload(self, session):
        friendly = _army(session, "a1", "nebra:10")
        hostile = _army(session, "w5")

        replay = make_battle_replay(session, friendly, hostile, now=lambda: NOW)

        heroes = [0] * 16
        heroes[2] = 10
        expected = (
            '{"winner":"Unknown","left":"Solution","right":"Instance","date":1700000000,'
            '"title":"Proposed Solution",'
            f'"setup":{json.dumps([-4, 0, -1, -1, -1, -1] * 5, separators=(",", ":"))},'
            f'"shero":{json.dumps(heroes, separators=(",", ":"))},'
            f'"player":{json.dumps([19, -1, -1, -1, -1, -1] * 5, separators=(",", ":"))},'
            f'"phero":{json.dumps([0] * 16, separators=(",", ":"))}'
            "}"
        )
        assert base64.b64decode(replay).decode("utf-8") == expected

    def test_key_order(self, session):
        army = _army(session, "a1")
        decoded = json.loads(base64.b64decode(make_battle_replay(session, army, army, now=lambda: NOW)))

        assert list(decoded) == ["winner", "left", "right", "date", "title", "setup", "shero", "player", "phero"]

    def test_date_is_truncated_to_seconds(self, session):
        army = _army(session, "a1")

        payload = decode_battle_replay(make_battle_replay(session, army, army, now=lambda: 1234.9))

        assert payload.date == 1234

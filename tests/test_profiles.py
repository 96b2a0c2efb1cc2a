import pytest

from debugme.engine.profiles import ProfileStore, create_draft_profile, require_known_competencies
from debugme.errors import IndexOutOfRange, InvalidArgument, NotFound, PreconditionViolation

from conftest import make_profile


@pytest.fixture
def store():
    return ProfileStore()


class TestAddProfile:
    def test_returns_new_index(self, store):
        assert store.add_profile(make_profile("A", Creativity=3)) == 0
        assert store.add_profile(make_profile("B", Creativity=4)) == 1
        assert [p.name for p in store.profiles] == ["A", "B"]

    def test_names_need_not_be_unique(self, store):
        store.add_profile(make_profile("Same"))
        store.add_profile(make_profile("Same"))
        assert len(store.profiles) == 2

    def test_name_is_trimmed(self, store):
        store.add_profile(make_profile("  Dev  "))
        assert store.profiles[0].name == "Dev"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, store, name):
        with pytest.raises(InvalidArgument):
            store.add_profile(make_profile(name))

    @pytest.mark.parametrize("level", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, store, level):
        with pytest.raises(InvalidArgument):
            store.add_profile(make_profile("X", Leadership=level))
        assert store.profiles == []

    def test_adding_does_not_select(self, store):
        store.add_profile(make_profile("A"))
        assert store.selected is None


class TestSelectProfile:
    def test_select_and_clear(self, store):
        store.add_profile(make_profile("A"))
        store.add_profile(make_profile("B"))
        assert store.select_profile(1).name == "B"
        assert store.selected_index == 1
        assert store.select_profile(None) is None
        assert store.selected is None

    def test_clearing_an_empty_store_is_fine(self, store):
        assert store.select_profile(None) is None

    def test_selecting_with_no_profiles(self, store):
        with pytest.raises(PreconditionViolation):
            store.select_profile(0)

    @pytest.mark.parametrize("index", [1, 5, -1])
    def test_out_of_range(self, store, index):
        store.add_profile(make_profile("A"))
        with pytest.raises(IndexOutOfRange):
            store.select_profile(index)
        assert store.selected_index is None

    def test_out_of_range_is_a_not_found(self, store):
        store.add_profile(make_profile("A"))
        with pytest.raises(NotFound):
            store.select_profile(3)


class TestSnapshot:
    def test_round_trip(self, store):
        store.add_profile(make_profile("A", Creativity=2))
        store.add_profile(make_profile("B", Leadership=5))
        store.select_profile(1)
        restored = ProfileStore.from_snapshot(store.snapshot())
        assert restored.profiles == store.profiles
        assert restored.selected_index == 1

    def test_invalid_stored_rating_rejected(self):
        data = {"profiles": [{"name": "A", "competencies": {"Creativity": 9}}], "selected": None}
        with pytest.raises(InvalidArgument):
            ProfileStore.from_snapshot(data)


class TestDraftProfile:
    def test_every_competency_starts_at_one(self, catalog):
        draft = create_draft_profile(catalog.competencies)
        assert list(draft) == catalog.competency_names
        assert set(draft.values()) == {1}

    def test_empty_catalog(self):
        assert create_draft_profile([]) == {}


class TestKnownCompetencies:
    def test_catalog_names_accepted(self, catalog):
        require_known_competencies(create_draft_profile(catalog.competencies), catalog.competency_names)

    def test_misspelled_name_rejected(self, catalog):
        with pytest.raises(InvalidArgument, match="Creatvity"):
            require_known_competencies({"Creatvity": 3, "Leadership": 2}, catalog.competency_names)

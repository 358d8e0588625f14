# ==============================================
# Tests for OrderedField / ordered()
# ==============================================
#
# Host records "persist" their values through a property or the
# instance __dict__; ordered attributes must read back in the
# order they were assigned however the store reorders them.
# ==============================================

import random
from dataclasses import dataclass, field

import pytest

from ordered_attrs import (
    AlphabeticalSerializer,
    ConfigurationError,
    InputOrderSerializer,
    OrderedField,
    Serializer,
    is_ordered,
    ordered,
    ordered_fields,
)
from ordered_attrs.testing import assert_ordered_attributes


class ReversingSerializer(Serializer):
    """Custom serializer: reads back in reverse."""

    def serialize(self, values):
        return self.as_strings(values)

    def deserialize(self, values):
        return list(reversed(self.as_strings(values)))


@pytest.fixture
def record(work_class, creators, subjects):
    work = work_class()
    work.creators = creators
    work.subjects = subjects
    return work


# ==============================================
# Property-backed host record
# ==============================================

class TestPropertyBackedRecord:

    def test_store_holds_encoded_values_in_its_own_order(self, record):
        assert record._creators == ["2~Atropos", "1~Lachesis", "0~Clotho"]

    def test_non_ordered_attribute_stored_untouched(self, record, subjects):
        assert record.__dict__["subjects"] == subjects

    def test_reads_back_in_assigned_order(self, record, creators):
        assert record.creators == creators

    def test_non_ordered_attribute_reads_untouched(self, record, subjects):
        assert record.subjects == subjects

    def test_sanitizes_on_write(self, work_class):
        work = work_class()
        work.creators = ["<b>Clotho</b>", "Lachesis"]
        assert work.creators == ["Clotho", "Lachesis"]

    def test_none_is_stored_as_empty(self, work_class):
        work = work_class()
        work.creators = None
        assert work._creators == []
        assert work.creators == []

    def test_shuffling_store(self):
        @ordered("authors")
        class Shuffled:
            def __init__(self, seed):
                self._random = random.Random(seed)
                self._authors = []

            @property
            def authors(self):
                return self._authors

            @authors.setter
            def authors(self, values):
                self._authors = list(values)
                self._random.shuffle(self._authors)

        authors = ["Ada", "Grace", "Barbara", "Frances", "Radia"]
        for seed in range(5):
            record = Shuffled(seed)
            record.authors = authors
            assert record.authors == authors

    def test_class_access_returns_field(self, work_class):
        assert isinstance(work_class.creators, OrderedField)
        assert work_class.creators.name == "creators"


# ==============================================
# Dataclass / annotated host records
# ==============================================

@ordered("keywords", serializer=AlphabeticalSerializer)
@ordered("authors")
@dataclass
class Article:
    title: str
    authors: list = field(default_factory=list)
    keywords: list = field(default_factory=list)


class TestDataclassRecord:

    def test_init_goes_through_serializer(self):
        article = Article("Fates", ["Hesiod", "Homer"], ["myth", "Greek"])
        assert article.__dict__["authors"] == ["0~Hesiod", "1~Homer"]
        assert article.authors == ["Hesiod", "Homer"]

    def test_per_field_serializer(self):
        article = Article("Fates", keywords=["myth", "Greek", "fate"])
        assert article.keywords == ["fate", "Greek", "myth"]

    def test_default_factory(self):
        assert Article("Fates").authors == []

    def test_equality_uses_decoded_values(self):
        assert Article("Fates", ["Hesiod"]) == Article("Fates", ["Hesiod"])

    def test_title_untouched(self):
        assert Article("<b>Fates</b>").title == "<b>Fates</b>"

    def test_unset_annotated_attribute_raises_attribute_error(self):
        @ordered("lines")
        class Note:
            lines: list

        with pytest.raises(AttributeError, match="'Note' object has no attribute 'lines'"):
            Note().lines

    def test_class_default_used_until_assigned(self):
        @ordered("lines")
        class Note:
            lines = None

        note = Note()
        assert note.lines == []
        note.lines = ["b", "a"]
        assert note.lines == ["b", "a"]

    def test_delete(self):
        article = Article("Fates", ["Hesiod"])
        del article.authors
        with pytest.raises(AttributeError):
            article.authors


# ==============================================
# Other accessors
# ==============================================

class TestOtherAccessors:

    def test_slots(self):
        @ordered("tags")
        class Slotted:
            __slots__ = ("tags",)

        item = Slotted()
        item.tags = ["b", "a"]
        assert Slotted.tags.accessor.__get__(item, Slotted) == ["0~b", "1~a"]
        assert item.tags == ["b", "a"]

    def test_field_declared_in_class_body(self):
        class Playlist:
            tracks = OrderedField()

        playlist = Playlist()
        playlist.tracks = ["Intro", "Outro"]
        assert playlist.__dict__["tracks"] == ["0~Intro", "1~Outro"]
        assert playlist.tracks == ["Intro", "Outro"]
        assert ordered_fields(Playlist) == frozenset({"tracks"})

    def test_custom_serializer_instance(self):
        @ordered("steps", serializer=ReversingSerializer())
        class Recipe:
            steps: list

        recipe = Recipe()
        recipe.steps = ["chop", "fry"]
        assert recipe.steps == ["fry", "chop"]


# ==============================================
# Inheritance
# ==============================================

class TestInheritance:

    def test_subclass_inherits_ordering(self, work_class, creators):
        class Book(work_class):
            pass

        book = Book()
        book.creators = creators
        assert book.creators == creators
        assert is_ordered(Book, "creators")

    def test_subclass_can_swap_serializer(self, work_class):
        @ordered("creators", serializer=AlphabeticalSerializer)
        class Anthology(work_class):
            pass

        anthology = Anthology()
        anthology.creators = ["Lachesis", "Clotho"]
        # Same underlying property, different codec
        assert anthology._creators == ["Lachesis", "Clotho"]
        assert anthology.creators == ["Clotho", "Lachesis"]
        assert isinstance(work_class.creators.serializer, InputOrderSerializer)


# ==============================================
# Introspection
# ==============================================

class TestIntrospection:

    def test_is_ordered(self, record, work_class):
        assert is_ordered(record, "creators")
        assert is_ordered(work_class, "creators")
        assert not is_ordered(record, "subjects")
        assert not is_ordered(record, "missing")

    def test_ordered_fields(self, record):
        assert ordered_fields(record) == frozenset({"creators"})
        assert ordered_fields(Article) == frozenset({"authors", "keywords"})

    def test_plain_class_has_none(self):
        class Plain:
            pass

        assert ordered_fields(Plain) == frozenset()

    def test_assert_ordered_attributes(self, record):
        assert_ordered_attributes(record, "creators")
        assert_ordered_attributes(Article, "keywords", "authors")

    def test_assert_ordered_attributes_failure(self, record):
        with pytest.raises(AssertionError, match="Actual: \\['creators'\\]"):
            assert_ordered_attributes(record, "creators", "subjects")


# ==============================================
# Configuration errors (raised at decoration time)
# ==============================================

class TestConfigurationErrors:

    def test_missing_accessor(self):
        class Plain:
            pass

        with pytest.raises(ConfigurationError, match="no accessor for 'creators'"):
            ordered("creators")(Plain)

    def test_read_only_property(self):
        class ReadOnly:
            @property
            def creators(self):
                return []

        with pytest.raises(ConfigurationError, match="read-only property"):
            ordered("creators")(ReadOnly)

    def test_method(self):
        class WithMethod:
            def creators(self):
                return []

        with pytest.raises(ConfigurationError, match="not an attribute"):
            ordered("creators")(WithMethod)

    def test_failed_decoration_leaves_class_untouched(self):
        @ordered("creators")
        class Draft:
            def __init__(self):
                self._creators = []

            @property
            def creators(self):
                return self._creators

            @creators.setter
            def creators(self, values):
                self._creators = list(values)

        field_before = Draft.__dict__["creators"]
        with pytest.raises(ConfigurationError, match="no accessor for 'missing'"):
            ordered("creators", "missing", serializer=AlphabeticalSerializer)(Draft)

        assert Draft.__dict__["creators"] is field_before
        assert "missing" not in Draft.__dict__
        assert isinstance(Draft.creators.serializer, InputOrderSerializer)

    def test_failed_decoration_of_plain_property(self):
        class Draft:
            @property
            def creators(self):
                return self._creators

            @creators.setter
            def creators(self, values):
                self._creators = values

        creators_property = Draft.__dict__["creators"]
        with pytest.raises(ConfigurationError):
            ordered("creators", "missing")(Draft)

        assert Draft.__dict__["creators"] is creators_property
        assert ordered_fields(Draft) == frozenset()

    def test_no_attributes(self):
        with pytest.raises(ConfigurationError):
            ordered()

    def test_invalid_attribute_name(self):
        with pytest.raises(ConfigurationError, match="Invalid attribute name"):
            ordered("not a name")

    @pytest.mark.parametrize("bad", [object(), dict, "input_order"])
    def test_not_a_serializer(self, bad):
        with pytest.raises(ConfigurationError, match="is not a Serializer"):
            ordered("creators", serializer=bad)

    def test_descriptor_not_a_serializer(self):
        with pytest.raises(ConfigurationError):
            OrderedField(serializer=object())

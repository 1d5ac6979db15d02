from django.test import SimpleTestCase

from string_analyzer import services
from string_analyzer.errors import (
    ConflictingFiltersError,
    DuplicateValueError,
    InvalidFilterValueError,
    MissingFieldError,
    NotFoundError,
    TypeMismatchError,
    UnparseableQueryError,
)
from string_analyzer.repository import StringRepository


class CreateStringTests(SimpleTestCase):
    def setUp(self):
        self.repository = StringRepository()

    def test_creates_record(self):
        record = services.create_string(self.repository, {"value": "Racecar"})

        self.assertEqual(record.value, "Racecar")
        self.assertEqual(record.id, record.properties.sha256_hash)
        self.assertIsNotNone(record.created_at)
        self.assertIs(self.repository.find_by_value("Racecar"), record)

    def test_keeps_value_verbatim(self):
        record = services.create_string(self.repository, {"value": "  padded  "})
        self.assertEqual(record.value, "  padded  ")

    def test_accepts_empty_string(self):
        record = services.create_string(self.repository, {"value": ""})
        self.assertEqual(record.properties.length, 0)

    def test_missing_value(self):
        with self.assertRaises(MissingFieldError):
            services.create_string(self.repository, {})
        with self.assertRaises(MissingFieldError):
            services.create_string(self.repository, {"value": None})
        with self.assertRaises(MissingFieldError):
            services.create_string(self.repository, None)

    def test_non_string_value(self):
        for bad in [42, True, ["a"], {"a": 1}]:
            with self.assertRaises(TypeMismatchError):
                services.create_string(self.repository, {"value": bad})
        self.assertEqual(self.repository.count(), 0)

    def test_duplicate_value(self):
        services.create_string(self.repository, {"value": "hello"})
        with self.assertRaises(DuplicateValueError):
            services.create_string(self.repository, {"value": "hello"})
        self.assertEqual(self.repository.count(), 1)

    def test_values_differing_in_case_are_distinct(self):
        first = services.create_string(self.repository, {"value": "Hello"})
        second = services.create_string(self.repository, {"value": "hello"})
        self.assertNotEqual(first.id, second.id)


class LookupAndDeleteTests(SimpleTestCase):
    def setUp(self):
        self.repository = StringRepository()
        services.create_string(self.repository, {"value": "noon"})

    def test_get_string(self):
        self.assertEqual(services.get_string(self.repository, "noon").value, "noon")

    def test_get_missing_string(self):
        with self.assertRaises(NotFoundError):
            services.get_string(self.repository, "moon")

    def test_delete_string(self):
        services.delete_string(self.repository, "noon")
        self.assertEqual(self.repository.count(), 0)
        with self.assertRaises(NotFoundError):
            services.delete_string(self.repository, "noon")


class ListStringsTests(SimpleTestCase):
    def setUp(self):
        self.repository = StringRepository()
        for value in ["racecar", "hello world", "Anna", "abc"]:
            services.create_string(self.repository, {"value": value})

    def test_coerces_query_parameters(self):
        records, filters = services.list_strings(
            self.repository, {"is_palindrome": "true", "min_length": "4"})

        self.assertEqual([r.value for r in records], ["racecar", "Anna"])
        self.assertEqual(filters.as_dict(), {"is_palindrome": True, "min_length": 4})

    def test_no_filters_returns_everything(self):
        records, filters = services.list_strings(self.repository, {})
        self.assertEqual(len(records), 4)
        self.assertTrue(filters.is_empty())

    def test_ignores_unknown_parameters(self):
        records, filters = services.list_strings(self.repository, {"page": "2"})
        self.assertEqual(len(records), 4)

    def test_contains_character(self):
        records, _ = services.list_strings(self.repository, {"contains_character": "A"})
        self.assertEqual([r.value for r in records], ["Anna"])

    def test_word_count(self):
        records, _ = services.list_strings(self.repository, {"word_count": "2"})
        self.assertEqual([r.value for r in records], ["hello world"])

    def test_invalid_values(self):
        bad_filters = [
            {"is_palindrome": "maybe"},
            {"min_length": "-1"},
            {"max_length": "ten"},
            {"word_count": ""},
            {"contains_character": "ab"},
            {"contains_character": ""},
            {"min_length": "5.0"},
            {"max_length": " 5"},
            {"word_count": "+2"},
        ]
        for raw in bad_filters:
            with self.assertRaises(InvalidFilterValueError) as ctx:
                services.list_strings(self.repository, raw)
            self.assertIn(next(iter(raw)), ctx.exception.errors)


class NaturalLanguageTests(SimpleTestCase):
    def setUp(self):
        self.repository = StringRepository()
        for value in ["racecar", "level", "noon", "hello world"]:
            services.create_string(self.repository, {"value": value})

    def test_filters_records(self):
        records, filters = services.filter_by_natural_language(
            self.repository, "palindromes longer than 4 characters")

        self.assertEqual([r.value for r in records], ["racecar", "level"])
        self.assertEqual(filters.as_dict(), {"is_palindrome": True, "min_length": 5})

    def test_missing_query(self):
        for query in [None, "", "   "]:
            with self.assertRaises(MissingFieldError):
                services.filter_by_natural_language(self.repository, query)

    def test_unparseable_query(self):
        with self.assertRaises(UnparseableQueryError):
            services.filter_by_natural_language(self.repository, "anything interesting")

    def test_conflicting_query(self):
        with self.assertRaises(ConflictingFiltersError):
            services.filter_by_natural_language(
                self.repository, "longer than 10 characters and shorter than 5 characters")


class CreateStringEncodingTests(SimpleTestCase):
    def test_lone_surrogate_is_rejected_before_storing(self):
        repository = StringRepository()
        with self.assertRaises(TypeMismatchError):
            services.create_string(repository, {"value": "\ud800"})
        self.assertEqual(repository.count(), 0)

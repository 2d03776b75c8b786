import unittest
from types import MappingProxyType

from foldean.categories import (
    CATEGORY_EXTENSIONS,
    FALLBACK_CATEGORY,
    category_folder_names,
    classify,
    extension_of,
)


class TestCategories(unittest.TestCase):
    def test_extension_of(self):
        self.assertEqual(extension_of("report.PDF"), "pdf")
        self.assertEqual(extension_of("archive.tar.gz"), "gz")
        self.assertEqual(extension_of(".env"), "env")
        self.assertEqual(extension_of("README"), "")
        self.assertEqual(extension_of("notes."), "")
        self.assertEqual(extension_of(""), "")

    def test_classify_is_case_insensitive(self):
        self.assertEqual(classify("Photo.PNG"), "Images")
        self.assertEqual(classify("photo.png"), "Images")
        self.assertEqual(classify("Setup.AppImage"), "Installer")

    def test_classify_is_deterministic(self):
        for name in ["a.mp3", "b.zip", "c.xyz123", "noext", ".env"]:
            self.assertEqual(classify(name), classify(name))

    def test_single_category_extensions(self):
        """Every extension listed in exactly one category maps to that category."""
        owners: dict[str, list[str]] = {}
        for category, extensions in CATEGORY_EXTENSIONS.items():
            for ext in extensions:
                owners.setdefault(ext, []).append(category)

        for ext, categories in owners.items():
            if len(categories) == 1:
                self.assertEqual(classify(f"file.{ext}"), categories[0], ext)

    def test_pdf_goes_to_documents_not_books(self):
        self.assertIn("pdf", CATEGORY_EXTENSIONS["Documents"])
        self.assertIn("pdf", CATEGORY_EXTENSIONS["Books"])
        self.assertEqual(classify("book.pdf"), "Documents")

    def test_first_match_follows_table_order(self):
        table = {"First": frozenset({"dup"}), "Second": frozenset({"dup", "only"})}
        self.assertEqual(classify("x.dup", table), "First")
        self.assertEqual(classify("x.only", table), "Second")

        reversed_table = dict(reversed(list(table.items())))
        self.assertEqual(classify("x.dup", reversed_table), "Second")

    def test_unknown_and_missing_extensions_go_to_others(self):
        self.assertEqual(classify("data.xyz123"), FALLBACK_CATEGORY)
        self.assertEqual(classify("Makefile"), FALLBACK_CATEGORY)
        self.assertEqual(classify("trailing."), FALLBACK_CATEGORY)
        self.assertEqual(classify(".env"), FALLBACK_CATEGORY)
        self.assertEqual(FALLBACK_CATEGORY, "Others")

    def test_table_is_read_only(self):
        self.assertIsInstance(CATEGORY_EXTENSIONS, MappingProxyType)
        with self.assertRaises(TypeError):
            CATEGORY_EXTENSIONS["Temp"] = frozenset({"tmp"})
        self.assertIsInstance(CATEGORY_EXTENSIONS["Images"], frozenset)

    def test_table_order(self):
        self.assertEqual(
            list(CATEGORY_EXTENSIONS),
            ["Documents", "Sheets", "Slides", "Images", "Audio", "Videos",
             "Code", "Books", "Archives", "Installer", "Design"],
        )

    def test_category_folder_names_include_fallback(self):
        names = category_folder_names()
        self.assertIn("Others", names)
        self.assertIn("Documents", names)
        self.assertEqual(len(names), len(CATEGORY_EXTENSIONS) + 1)


if __name__ == "__main__":
    unittest.main()

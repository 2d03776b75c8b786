"""
Extension-based classification for Foldean.

The category table is plain data: an ordered, read-only mapping of folder
name to the lowercase extensions (no dot) that belong in it.
"""

from types import MappingProxyType


FALLBACK_CATEGORY = "Others"

# Declaration order matters: the first category containing an extension wins.
# "pdf" is listed under both Documents and Books and resolves to Documents.
CATEGORY_EXTENSIONS = MappingProxyType({
    # Documents
    "Documents": frozenset({"pdf", "doc", "docx", "rtf", "txt", "md", "markdown", "odt", "oxps"}),
    "Sheets": frozenset({"xls", "xlsx", "csv", "ods"}),
    "Slides": frozenset({"ppt", "pptx", "key"}),

    # Media
    "Images": frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff", "heic"}),
    "Audio": frozenset({"mp3", "wav", "m4a", "flac", "aac", "ogg"}),
    "Videos": frozenset({"mp4", "mov", "mkv", "avi", "webm"}),

    # Code & data
    "Code": frozenset({
        "c", "cpp", "h", "hpp", "rs", "py", "js", "ts", "tsx", "java",
        "go", "rb", "sh", "yaml", "yml", "json", "toml",
    }),
    "Books": frozenset({"epub", "mobi", "azw", "azw3", "pdf"}),

    # Archives & installers
    "Archives": frozenset({"zip", "rar", "7z", "tar", "gz", "bz2", "xz"}),
    "Installer": frozenset({"dmg", "pkg", "msi", "exe", "deb", "rpm", "appimage", "app"}),

    # Design/graphics
    "Design": frozenset({"psd", "ai", "xd", "fig", "sketch"}),
})


def extension_of(filename: str) -> str:
    """
    Return the lowercase extension of a filename, without the dot.

    The extension is whatever follows the last '.', so '.env' gives 'env',
    'archive.tar.gz' gives 'gz', and 'README' or 'notes.' give ''.
    """
    _, dot, ext = filename.rpartition(".")
    if not dot:
        return ""
    return ext.lower()


def classify(filename: str, table=CATEGORY_EXTENSIONS) -> str:
    """
    Map a filename to its category folder name.

    Args:
        filename: Bare file name (no directory part needed).
        table: Ordered mapping of category name -> extensions.

    Returns:
        The first category whose extension set contains the file's extension,
        or FALLBACK_CATEGORY when none does.
    """
    ext = extension_of(filename)
    if ext:
        for category, extensions in table.items():
            if ext in extensions:
                return category
    return FALLBACK_CATEGORY


def category_folder_names(table=CATEGORY_EXTENSIONS) -> frozenset[str]:
    """Names of every folder Foldean may create, including the fallback."""
    return frozenset(table) | {FALLBACK_CATEGORY}

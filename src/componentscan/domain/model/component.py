"""Component record produced for every discovered file."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Component:
    """Registration record of one discovered component file.

    Each discovered file yields two records: the eager one (async_=False,
    import_ binds the export synchronously) and its lazy counterpart
    (async_=True, names carry the lazy prefix, import_ holds the async loader).

    Attributes:
        pascal_name: Registration name in PascalCase, unique within one run
        kebab_name: Same identity in kebab-case
        file_path: Absolute path, escaped for embedding in generated code
        short_path: Path relative to the source root, forward slashes
        chunk_name: short_path without extension, names the async chunk
        import_: Expression binding the component (sync or async loader)
        async_import: Expression of a thunk loading the file asynchronously
        export: Name of the export to bind
        async_: True only for the lazy variant
        global_: Component is registered process-wide
    """

    pascal_name: str
    kebab_name: str
    file_path: str
    short_path: str
    chunk_name: str
    import_: str = ""
    async_import: str = ""
    export: str = "default"
    async_: bool = False
    global_: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_path:
            raise ValueError("file_path must not be empty")
        if not self.export:
            raise ValueError("export must not be empty")

    @property
    def names(self) -> tuple[str, str]:
        """Names a tag can refer to this component by."""
        return (self.pascal_name, self.kebab_name)

    def to_dict(self) -> dict[str, object]:
        """Convert to the camelCase record consumed by code generators.

        The "async" key is only present on lazy records.
        """
        data: dict[str, object] = {
            "pascalName": self.pascal_name,
            "kebabName": self.kebab_name,
            "import": self.import_,
            "asyncImport": self.async_import,
            "export": self.export,
            "filePath": self.file_path,
            "shortPath": self.short_path,
            "chunkName": self.chunk_name,
            "global": self.global_,
        }
        if self.async_:
            data["async"] = True
        return data

import pytest

from schema_registry_codegen.pipeline import (
    AtomicWriter,
    Definition,
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputFile,
    OutputMode,
    SchemaGenerator,
)
from schema_registry_codegen.pipeline.writer import validate_content


class TestAtomicWriter:
    """Test writing generated files"""

    def test_writes_generated_files(self, tmp_path):
        files = SchemaGenerator().generate([Definition("a.B", {"properties": {"x": {"$ref": "a.C"}}}), Definition("a.C", {})])

        written = AtomicWriter(tmp_path).write_all(files)

        assert written == [tmp_path / "_schemas" / "AB.ts", tmp_path / "_schemas" / "AC.ts"]
        assert written[0].read_text(encoding="utf-8") == files[0].content

    def test_no_temporary_files_left(self, tmp_path):
        files = SchemaGenerator(GeneratorConfig(language="python")).generate([Definition("a.B", {})])

        AtomicWriter(tmp_path).write_all(files)

        assert [p.name for p in (tmp_path / "_schemas").iterdir()] == ["AB.py"]

    def test_existing_file_raises(self, tmp_path):
        output = OutputFile("_schemas/B.ts", 'register("a.B", schema);\n')
        AtomicWriter(tmp_path).write(output)

        with pytest.raises(FileExistsError):
            AtomicWriter(tmp_path).write(output)

    def test_force_overwrites(self, tmp_path):
        AtomicWriter(tmp_path).write(OutputFile("_schemas/B.ts", 'register("old", schema);\n'))

        path = AtomicWriter(tmp_path, OutputConfig(mode=OutputMode.FORCE)).write(OutputFile("_schemas/B.ts", 'register("new", schema);\n'))

        assert path.read_text(encoding="utf-8") == 'register("new", schema);\n'

    def test_non_atomic_write(self, tmp_path):
        path = AtomicWriter(tmp_path, OutputConfig(atomic_write=False)).write(OutputFile("B.ts", 'register("a.B", schema);\n'))

        assert path.exists()

    def test_invalid_output_not_written(self, tmp_path):
        with pytest.raises(GenerationError):
            AtomicWriter(tmp_path).write(OutputFile("_schemas/B.py", "def add_schema(:\n    register('a.B', schema)\n"))

        assert not (tmp_path / "_schemas" / "B.py").exists()

    def test_validation_can_be_disabled(self, tmp_path):
        path = AtomicWriter(tmp_path, OutputConfig(validate_before_write=False)).write(OutputFile("B.ts", "{"))

        assert path.read_text(encoding="utf-8") == "{"


class TestWriteAll:
    """Test that a run writes every file or none"""

    def setup_method(self):
        self.first = OutputFile("_schemas/B.ts", 'register("a.B", schema);\n')
        self.second = OutputFile("_schemas/C.ts", 'register("a.C", schema);\n')

    @pytest.mark.parametrize("mode", [OutputMode.ERROR_IF_EXISTS, OutputMode.FORCE])
    def test_duplicate_path_writes_nothing(self, tmp_path, mode):
        duplicate = OutputFile("_schemas/B.ts", 'register("b.B", schema);\n')

        with pytest.raises(GenerationError, match="Duplicate output path"):
            AtomicWriter(tmp_path, OutputConfig(mode=mode)).write_all([self.first, duplicate])

        assert not (tmp_path / "_schemas").exists()

    def test_existing_later_file_writes_nothing(self, tmp_path):
        AtomicWriter(tmp_path).write(self.second)

        with pytest.raises(FileExistsError):
            AtomicWriter(tmp_path).write_all([self.first, self.second])

        assert not (tmp_path / "_schemas" / "B.ts").exists()

    def test_invalid_later_file_writes_nothing(self, tmp_path):
        invalid = OutputFile("_schemas/C.ts", "const schema: object = {;\n")

        with pytest.raises(GenerationError):
            AtomicWriter(tmp_path).write_all([self.first, invalid])

        assert not (tmp_path / "_schemas").exists()

    def test_force_rewrites_existing_files(self, tmp_path):
        AtomicWriter(tmp_path).write(self.second)

        written = AtomicWriter(tmp_path, OutputConfig(mode=OutputMode.FORCE)).write_all([self.first, self.second])

        assert [p.name for p in written] == ["B.ts", "C.ts"]


class TestValidateContent:
    """Test pre-write validation"""

    def test_unbalanced_braces(self):
        with pytest.raises(GenerationError, match="unbalanced"):
            validate_content(OutputFile("B.ts", 'const schema: object = {;\nregister("a.B", schema);\n'))

    def test_braces_in_strings_ignored(self):
        content = 'const schema: object = {"pattern": "^{[a-z]+$", "description": "say \\"}\\""};\nregister("a.B", schema);\n'

        validate_content(OutputFile("B.ts", content))

    def test_missing_registration(self):
        with pytest.raises(GenerationError, match="register"):
            validate_content(OutputFile("B.py", "schema: dict = {}\n"))

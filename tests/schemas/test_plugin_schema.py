"""
Tests for PluginData, Internals and Mapping
"""
import pytest
import tempfile
import shutil
from pathlib import Path
from pydantic import ValidationError

from plugdecomp.schemas import PluginData, Internals, Mapping, MappingError


class TestMapping:
    """Test mapping parsing"""

    def test_parse_display_values(self):
        assert Mapping.parse("Mojang") is Mapping.MOJANG
        assert Mapping.parse("Spigot/Obfuscated") is Mapping.SPIGOT

    def test_parse_member_names(self):
        assert Mapping.parse("mojang") is Mapping.MOJANG
        assert Mapping.parse(" SPIGOT ") is Mapping.SPIGOT

    def test_parse_unknown_raises(self):
        with pytest.raises(MappingError):
            Mapping.parse("Yarn")

    def test_mapping_error_is_value_error(self):
        assert issubclass(MappingError, ValueError)

    def test_str_is_display_value(self):
        assert str(Mapping.SPIGOT) == "Spigot/Obfuscated"


class TestInternals:
    """Test Internals validation"""

    def test_accepts_enum_and_value(self):
        assert Internals(mapping=Mapping.MOJANG).mapping is Mapping.MOJANG
        assert Internals(mapping="Spigot/Obfuscated").mapping is Mapping.SPIGOT

    def test_rejects_unknown_mapping(self):
        with pytest.raises(ValidationError):
            Internals(mapping="Intermediary")


class TestPluginData:
    """Test PluginData validation"""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory"""
        temp = Path(tempfile.mkdtemp())
        yield temp
        if temp.exists():
            shutil.rmtree(temp)

    @pytest.fixture
    def fields(self, temp_dir):
        """Valid constructor arguments"""
        jarfile = temp_dir / "plugin.jar"
        jarfile.write_bytes(b"PK")
        return {
            "name": "TestPlugin",
            "java_version": 21,
            "jarfile": jarfile,
            "output_dir": temp_dir / "out",
            "version": "1.21.4",
        }

    def test_defaults(self, fields):
        data = PluginData(**fields)
        assert data.internals is None
        assert data.java_sourceset == fields["output_dir"] / "src" / "main" / "java"
        assert data.resources_sourceset == fields["output_dir"] / "src" / "main" / "resources"

    def test_paths_from_strings(self, fields):
        fields["jarfile"] = str(fields["jarfile"])
        data = PluginData(**fields)
        assert isinstance(data.jarfile, Path)

    def test_name_kept_verbatim(self, fields):
        fields["name"] = "  My Plugin "
        assert PluginData(**fields).name == "  My Plugin "

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, fields, name):
        fields["name"] = name
        with pytest.raises(ValidationError):
            PluginData(**fields)

    def test_java_version_must_be_supported(self, fields):
        fields["java_version"] = 16
        with pytest.raises(ValidationError):
            PluginData(**fields)

    def test_missing_jarfile_rejected(self, fields, temp_dir):
        fields["jarfile"] = temp_dir / "missing.jar"
        with pytest.raises(ValidationError):
            PluginData(**fields)

    @pytest.mark.parametrize("version", ["1.8", "1.20.4", "1.21"])
    def test_release_versions_accepted(self, fields, version):
        fields["version"] = version
        assert PluginData(**fields).version == version

    @pytest.mark.parametrize("version", ["1.21-pre1", "24w14a", "2.0", "1.21.4.1", "1.20.4\n"])
    def test_other_versions_rejected(self, fields, version):
        fields["version"] = version
        with pytest.raises(ValidationError):
            PluginData(**fields)

    def test_frozen(self, fields):
        data = PluginData(**fields)
        with pytest.raises(ValidationError):
            data.name = "Other"

    def test_equal_values_compare_equal(self, fields):
        internals = Internals(mapping=Mapping.MOJANG)
        assert PluginData(**fields, internals=internals) == PluginData(**fields, internals=internals)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

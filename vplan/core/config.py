"""Static build declaration loaded from vplan.toml.

The declaration is the single immutable input describing what a project
wants built: ABI filters, packaging formats, split and shrink policy per
build type, and the signing defaults. It holds raw declared values; the
variant resolver is responsible for checking them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_list, get_table

__all__ = [
    "AbiConfig",
    "AppConfig",
    "BuildTypeConfig",
    "ConfigError",
    "Declaration",
    "PackagingConfig",
    "SigningConfig",
    "SplitsConfig",
    "CONFIG_FILENAME",
    "load_declaration",
    "load_declaration_or_default",
]

CONFIG_FILENAME = "vplan.toml"

DEFAULT_ABI_FILTERS = ("arm64-v8a", "armeabi-v7a", "x86_64")
DEFAULT_PROGUARD_FILES = ("proguard-android-optimize.txt", "proguard-rules.pro")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the declaration cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class AppConfig:
    application_id: str = "com.example.app"
    artifact_name: str = "app"
    debug_suffix: str = ".debug"


@dataclass(frozen=True, slots=True)
class AbiConfig:
    filters: tuple[str, ...] = DEFAULT_ABI_FILTERS


@dataclass(frozen=True, slots=True)
class PackagingConfig:
    """Requested packaging formats ("apk", "bundle")."""

    formats: tuple[str, ...] = ("apk", "bundle")


@dataclass(frozen=True, slots=True)
class SplitsConfig:
    abi: bool = True
    universal: bool = True
    density: bool = True
    language: bool = False


@dataclass(frozen=True, slots=True)
class BuildTypeConfig:
    """Shrink/minify policy and symbol handling for one build type."""

    minify: bool = False
    shrink_resources: bool = False
    debug_symbol_level: str | None = None
    proguard_files: tuple[str, ...] = ()


def _default_release() -> BuildTypeConfig:
    return BuildTypeConfig(
        minify=True,
        shrink_resources=True,
        debug_symbol_level="SYMBOL_TABLE",
        proguard_files=DEFAULT_PROGUARD_FILES,
    )


@dataclass(frozen=True, slots=True)
class SigningConfig:
    """Release signing defaults.

    Only the keystore path has a literal default. Secrets are never read from
    the declaration; they come from overrides or the environment.
    """

    default_store_file: str = "debug.keystore"


@dataclass(frozen=True, slots=True)
class Declaration:
    """Main declaration container."""

    app: AppConfig = field(default_factory=AppConfig)
    abi: AbiConfig = field(default_factory=AbiConfig)
    packaging: PackagingConfig = field(default_factory=PackagingConfig)
    splits: SplitsConfig = field(default_factory=SplitsConfig)
    release: BuildTypeConfig = field(default_factory=_default_release)
    debug: BuildTypeConfig = field(default_factory=BuildTypeConfig)
    signing: SigningConfig = field(default_factory=SigningConfig)
    # Relative keystore paths are resolved against this directory.
    project_dir: Path = field(default_factory=lambda: Path("."))

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, project_dir: Path | None = None) -> Declaration:
        """Create a Declaration from a mapping (parsed TOML).

        Raises:
            TypeError: A key is present with the wrong type.
        """
        app: StrDict = get_table(data, "app") or {}
        abi: StrDict = get_table(data, "abi") or {}
        packaging: StrDict = get_table(data, "packaging") or {}
        splits: StrDict = get_table(data, "splits") or {}
        release: StrDict = get_table(data, "release") or {}
        debug: StrDict = get_table(data, "debug") or {}
        signing: StrDict = get_table(data, "signing") or {}

        defaults = cls()
        filters = get_str_list(abi, "filters")
        formats = get_str_list(packaging, "formats")
        default_store = get_str(signing, "default_store_file")
        debug_suffix = get_str(app, "debug_suffix")

        return cls(
            app=AppConfig(
                application_id=get_str(app, "application_id") or defaults.app.application_id,
                artifact_name=get_str(app, "artifact_name") or defaults.app.artifact_name,
                debug_suffix=debug_suffix if debug_suffix is not None else defaults.app.debug_suffix,
            ),
            abi=AbiConfig(filters=filters if filters is not None else defaults.abi.filters),
            packaging=PackagingConfig(
                formats=formats if formats is not None else defaults.packaging.formats
            ),
            splits=SplitsConfig(
                abi=_bool_or(splits, "abi", defaults.splits.abi),
                universal=_bool_or(splits, "universal", defaults.splits.universal),
                density=_bool_or(splits, "density", defaults.splits.density),
                language=_bool_or(splits, "language", defaults.splits.language),
            ),
            release=_build_type_from(release, defaults.release),
            debug=_build_type_from(debug, defaults.debug),
            signing=SigningConfig(
                default_store_file=(
                    default_store
                    if default_store is not None
                    else defaults.signing.default_store_file
                )
            ),
            project_dir=project_dir if project_dir is not None else defaults.project_dir,
        )


def _bool_or(table: Mapping[str, object], key: str, default: bool) -> bool:
    value = get_bool(table, key)
    return default if value is None else value


def _build_type_from(table: Mapping[str, object], base: BuildTypeConfig) -> BuildTypeConfig:
    symbols = get_str(table, "debug_symbol_level")
    proguard = get_str_list(table, "proguard_files")
    return BuildTypeConfig(
        minify=_bool_or(table, "minify", base.minify),
        shrink_resources=_bool_or(table, "shrink_resources", base.shrink_resources),
        debug_symbol_level=symbols or base.debug_symbol_level,
        proguard_files=proguard if proguard is not None else base.proguard_files,
    )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(
            ConfigError(
                f"Config file not found: {path}",
                path=path,
                hint=f"Create {CONFIG_FILENAME} or pass --config",
            )
        )
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_declaration(path: Path) -> Result[Declaration, ConfigError]:
    """Load and parse the build declaration from a TOML file.

    Args:
        path: Path to vplan.toml

    Returns:
        Ok(Declaration) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        declaration = Declaration.from_dict(result.value, project_dir=path.parent)
        return Ok(declaration)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_declaration_or_default(path: Path) -> Result[Declaration, ConfigError]:
    """Load the declaration, or use defaults when the file does not exist.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Declaration(project_dir=path.parent))
    return load_declaration(path)

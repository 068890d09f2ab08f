"""Option catalog and template registry.

Static, process-wide tables describing every selectable axis (language,
routing + forms, styling), the templates shipped with the distribution, and
the substitutions applied when a combination has no template yet.  Nothing
here is mutated at run time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Manifest augmentations
# ---------------------------------------------------------------------------

DEPENDENCIES = "dependencies"
DEV_DEPENDENCIES = "devDependencies"


@dataclass(frozen=True)
class ManifestAugmentation:
    """Dependency entries an option merges into one ``package.json`` table."""

    table: str
    entries: tuple[tuple[str, str], ...]

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)


TYPESCRIPT_SUPPORT = ManifestAugmentation(
    DEV_DEPENDENCIES,
    (
        ("typescript", "^5.2.2"),
        ("@types/node", "^20.8.0"),
    ),
)

TAILWIND_TOOLCHAIN = ManifestAugmentation(
    DEPENDENCIES,
    (
        ("tailwindcss", "^3.3.0"),
        ("autoprefixer", "^10.4.16"),
        ("postcss", "^8.4.31"),
    ),
)

SHADCN_RUNTIME = ManifestAugmentation(
    DEPENDENCIES,
    (
        ("@radix-ui/react-slot", "^1.0.2"),
        ("class-variance-authority", "^0.7.0"),
        ("clsx", "^2.0.0"),
        ("lucide-react", "^0.544.0"),
        ("tailwind-merge", "^1.14.0"),
    ),
)


# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AxisOption:
    """One mutually exclusive choice on a feature axis."""

    key: str
    name: str
    description: str
    fragment: str = ""
    augmentations: tuple[ManifestAugmentation, ...] = ()

    @property
    def label(self) -> str:
        return f"{self.name} - {self.description}"


@dataclass(frozen=True)
class FeatureAxis:
    """A named, closed enumeration of options.  The first option is the default."""

    key: str
    title: str
    prompt: str
    options: tuple[AxisOption, ...]

    def __post_init__(self) -> None:
        keys = [option.key for option in self.options]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Duplicate option keys on axis {self.key!r}: {keys}")

    @property
    def keys(self) -> list[str]:
        return [option.key for option in self.options]

    @property
    def default(self) -> AxisOption:
        return self.options[0]

    def get(self, key: str) -> AxisOption | None:
        for option in self.options:
            if option.key == key:
                return option
        return None


LANGUAGE = FeatureAxis(
    key="language",
    title="Language",
    prompt="Choose your language",
    options=(
        AxisOption(
            "javascript",
            "JavaScript",
            "Modern JavaScript with React 19 and Vite",
            fragment="javascript",
        ),
        AxisOption(
            "typescript",
            "TypeScript",
            "TypeScript with full type safety and better DX",
            fragment="typescript",
            augmentations=(TYPESCRIPT_SUPPORT,),
        ),
    ),
)

ROUTER_FORM = FeatureAxis(
    key="router_form",
    title="Router + Forms",
    prompt="Choose your routing and form handling",
    options=(
        AxisOption(
            "router-formik",
            "React Router + Formik + Yup",
            "React Router v7 with traditional Formik forms and Yup validation",
        ),
        AxisOption(
            "router-rhf",
            "React Router + React Hook Form + Zod",
            "React Router v7 with modern React Hook Form and Zod validation",
            fragment="-rhf",
        ),
    ),
)

STYLING = FeatureAxis(
    key="styling",
    title="Styling",
    prompt="Choose your styling approach",
    options=(
        AxisOption(
            "vanilla",
            "Vanilla CSS",
            "Standard CSS with Sass preprocessing",
        ),
        AxisOption(
            "tailwind",
            "Tailwind CSS",
            "Utility-first CSS framework",
            fragment="-tailwind",
            augmentations=(TAILWIND_TOOLCHAIN,),
        ),
        AxisOption(
            "shadcn",
            "Tailwind CSS + ShadcnUI",
            "Modern UI components built on Tailwind CSS",
            fragment="-shadcn",
            augmentations=(TAILWIND_TOOLCHAIN, SHADCN_RUNTIME),
        ),
    ),
)

# Composition order of the template identifier and of manifest augmentation.
AXES: tuple[FeatureAxis, ...] = (LANGUAGE, ROUTER_FORM, STYLING)

AXES_BY_KEY: Mapping[str, FeatureAxis] = MappingProxyType({axis.key: axis for axis in AXES})


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Selection:
    """One option key per axis, in axis order."""

    language: str = LANGUAGE.default.key
    router_form: str = ROUTER_FORM.default.key
    styling: str = STYLING.default.key

    def option_for(self, axis: FeatureAxis) -> AxisOption | None:
        return axis.get(getattr(self, axis.key))

    def options(self) -> tuple[AxisOption, ...]:
        """Return the selected option of every axis.

        Raises:
            KeyError: If any axis holds a key the catalog does not define.
        """
        selected = []
        for axis in AXES:
            option = self.option_for(axis)
            if option is None:
                raise KeyError(f"{axis.key}={getattr(self, axis.key)!r}")
            selected.append(option)
        return tuple(selected)

    def replace(self, axis_key: str, option_key: str) -> "Selection":
        values = {axis.key: getattr(self, axis.key) for axis in AXES}
        values[axis_key] = option_key
        return Selection(**values)

    def key(self) -> str:
        """Serialise to a registry lookup key by concatenating fragments."""
        return "".join(option.fragment for option in self.options())


# ---------------------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------------------

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@dataclass(frozen=True)
class TemplateInfo:
    """Registry metadata for one shipped template tree."""

    identifier: str
    name: str
    description: str
    selection: Selection = field(default_factory=Selection)

    def source_dir(self, templates_root: Path | None = None) -> Path:
        return Path(templates_root or TEMPLATES_DIR) / self.identifier


def _register(*templates: TemplateInfo) -> Mapping[str, TemplateInfo]:
    registry: dict[str, TemplateInfo] = {}
    for info in templates:
        if info.selection.key() != info.identifier:
            raise ValueError(
                f"Template {info.identifier!r} does not match its selection "
                f"key {info.selection.key()!r}"
            )
        registry[info.identifier] = info
    return MappingProxyType(registry)


TEMPLATE_REGISTRY: Mapping[str, TemplateInfo] = _register(
    TemplateInfo(
        "javascript",
        "JavaScript",
        "Standard JavaScript template with React 19, Vite, and Formik",
        Selection("javascript", "router-formik", "vanilla"),
    ),
    TemplateInfo(
        "typescript",
        "TypeScript",
        "TypeScript template with React 19, Vite, and Formik",
        Selection("typescript", "router-formik", "vanilla"),
    ),
    TemplateInfo(
        "javascript-tailwind",
        "JavaScript + Tailwind CSS",
        "JavaScript template with Tailwind CSS for utility-first styling",
        Selection("javascript", "router-formik", "tailwind"),
    ),
    TemplateInfo(
        "typescript-tailwind",
        "TypeScript + Tailwind CSS",
        "TypeScript template with Tailwind CSS for utility-first styling",
        Selection("typescript", "router-formik", "tailwind"),
    ),
    TemplateInfo(
        "javascript-shadcn",
        "JavaScript + ShadcnUI",
        "JavaScript template with ShadcnUI components and Tailwind CSS",
        Selection("javascript", "router-formik", "shadcn"),
    ),
    TemplateInfo(
        "typescript-shadcn",
        "TypeScript + ShadcnUI",
        "TypeScript template with ShadcnUI components and Tailwind CSS",
        Selection("typescript", "router-formik", "shadcn"),
    ),
)


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fallback:
    """Substitute ``replacement`` for ``option`` on ``axis`` when no template exists."""

    axis: str
    option: str
    replacement: str
    notice: str


FALLBACKS: tuple[Fallback, ...] = (
    Fallback(
        axis="router_form",
        option="router-rhf",
        replacement="router-formik",
        notice=(
            "React Hook Form + Zod templates are not available yet. "
            "Using React Router + Formik + Yup for now."
        ),
    ),
)

"""Converter configuration — an immutable snapshot passed into every conversion."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OutputFormat(str, enum.Enum):
    REACT_NATIVE = "react-native"
    REACT = "react"
    REACT_NATIVE_WEB = "react-native-web"

    @property
    def is_native(self) -> bool:
        return self in (OutputFormat.REACT_NATIVE, OutputFormat.REACT_NATIVE_WEB)


class ExportStyle(str, enum.Enum):
    DEFAULT = "default"
    NAMED = "named"
    BOTH = "both"


class DimensionMode(str, enum.Enum):
    REMOVE = "remove"
    KEEP = "keep"
    CUSTOM = "custom"


class SpreadPosition(str, enum.Enum):
    NONE = "none"
    START = "start"
    END = "end"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ComponentConfig(_Frozen):
    name: str = "SvgComponent"
    export_style: ExportStyle = ExportStyle.DEFAULT
    use_types: bool = True
    wrap_in_memo: bool = False
    wrap_in_forward_ref: bool = False


class DimensionsConfig(_Frozen):
    mode: DimensionMode = DimensionMode.REMOVE
    custom_width: float | None = None
    custom_height: float | None = None
    preserve_view_box: bool = True


class PropsConfig(_Frozen):
    props_spread_position: SpreadPosition = SpreadPosition.END
    native_style_prop: bool = True
    title_prop: bool = False
    desc_prop: bool = False


class IconConfig(_Frozen):
    enabled: bool = False
    default_size: float = 24
    replace_color_with_prop: bool = False
    accessible: bool = True


class AttributeReplacement(_Frozen):
    find: str = Field(..., description="Literal substring to search for")
    replace: str = ""
    elements: frozenset[str] | None = Field(
        default=None,
        description="Lowercase element names the rule is restricted to",
    )

    @property
    def is_restricted(self) -> bool:
        return bool(self.elements)


class AttributesConfig(_Frozen):
    replacements: tuple[AttributeReplacement, ...] = ()
    remove_data_attrs: bool = True
    remove_aria_attrs: bool = False


# removeViewBox is absent: the dimension policy decides viewBox.
DEFAULT_SVGO_PLUGINS: tuple[dict[str, Any], ...] = (
    {"name": "removeDoctype"},
    {"name": "removeXMLProcInst"},
    {"name": "removeComments"},
    {"name": "removeMetadata"},
    {"name": "removeEditorsNSData"},
    {"name": "cleanupAttrs"},
    {"name": "mergeStyles"},
    {"name": "inlineStyles"},
    {"name": "minifyStyles"},
    {"name": "cleanupIds"},
    {"name": "removeUselessDefs"},
    {"name": "cleanupNumericValues"},
    {"name": "convertColors"},
    {"name": "removeUnknownsAndDefaults"},
    {"name": "removeNonInheritableGroupAttrs"},
    {"name": "removeUselessStrokeAndFill"},
    {"name": "cleanupEnableBackground"},
    {"name": "removeHiddenElems"},
    {"name": "removeEmptyText"},
    {"name": "convertShapeToPath"},
    {"name": "convertEllipseToCircle"},
    {"name": "moveElemsAttrsToGroup"},
    {"name": "moveGroupAttrsToElems"},
    {"name": "collapseGroups"},
    {"name": "convertPathData"},
    {"name": "convertTransform"},
    {"name": "removeEmptyAttrs"},
    {"name": "removeEmptyContainers"},
    {"name": "mergePaths"},
    {"name": "removeUnusedNS"},
    {"name": "sortAttrs"},
    {"name": "sortDefsChildren"},
    {"name": "removeTitle"},
    {"name": "removeDesc"},
)


class OptimizerConfig(_Frozen):
    """Opaque pass-through for the SVGO adapter."""

    enabled: bool = True
    plugins: tuple[dict[str, Any], ...] = DEFAULT_SVGO_PLUGINS


class CodeStyleConfig(_Frozen):
    """Opaque pass-through for the Prettier adapter."""

    semi: bool = True
    single_quote: bool = True
    tab_width: int = 2
    print_width: int = 100


class ConverterConfig(_Frozen):
    output_format: OutputFormat = OutputFormat.REACT_NATIVE
    component: ComponentConfig = Field(default_factory=ComponentConfig)
    dimensions: DimensionsConfig = Field(default_factory=DimensionsConfig)
    props: PropsConfig = Field(default_factory=PropsConfig)
    icon: IconConfig = Field(default_factory=IconConfig)
    attributes: AttributesConfig = Field(default_factory=AttributesConfig)
    svgo: OptimizerConfig = Field(default_factory=OptimizerConfig)
    code_style: CodeStyleConfig = Field(default_factory=CodeStyleConfig)

    @property
    def icon_active(self) -> bool:
        """Icon mode only rewrites the tree for plain react-native output."""
        return self.icon.enabled and self.output_format == OutputFormat.REACT_NATIVE

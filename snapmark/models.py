"""Pydantic models for serializer settings."""

from typing import Any, Callable, Dict, List, Literal, Optional, Pattern, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import DEFAULT_WHITESPACE_PRESERVED_TAGS
from .validation import clean_formatting, clean_settings


class FormattingConfig(BaseModel):
    """Options for the diffable formatter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    attributes_per_line: int = Field(
        1,
        alias="attributesPerLine",
        ge=0,
        description="How many attributes may stay on the same line as the tag name.",
    )
    classes_per_line: int = Field(
        1,
        alias="classesPerLine",
        ge=0,
        description="How many classes may stay on the same line as the class attribute.",
    )
    inline_styles_per_line: int = Field(
        1,
        alias="inlineStylesPerLine",
        ge=0,
        description="How many style declarations may stay on the same line as the style attribute.",
    )
    empty_attributes: bool = Field(
        True,
        alias="emptyAttributes",
        description='Print `=""` for empty attribute values; otherwise only the bare name.',
    )
    escape_attributes: bool = Field(
        False,
        alias="escapeAttributes",
        description="Encode reserved characters in attribute values as named entities.",
    )
    escape_inner_text: bool = Field(
        True,
        alias="escapeInnerText",
        description="Encode reserved characters in text nodes as named entities.",
    )
    self_closing_tag: bool = Field(
        False,
        alias="selfClosingTag",
        description="Render empty non-void elements as `<tag />`.",
    )
    tags_with_whitespace_preserved: Tuple[str, ...] = Field(
        DEFAULT_WHITESPACE_PRESERVED_TAGS,
        alias="tagsWithWhitespacePreserved",
        description="Tags whose inner content is emitted without added returns or indentation.",
    )
    void_elements: Literal["html", "xhtml", "xml"] = Field(
        "xhtml",
        alias="voidElements",
        description="Closing style for void elements: `<input>`, `<input />` or `<input></input>`.",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_options(cls, data: Any) -> Any:
        return clean_formatting(data, cls.model_fields)


class StubSpec(BaseModel):
    """How a stubbed element is replaced in the snapshot."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    remove_inner_html: Optional[bool] = Field(
        None, alias="removeInnerHtml", description="Discard the children of the stubbed element."
    )
    remove_attributes: Union[bool, List[str], None] = Field(
        None,
        alias="removeAttributes",
        description="True removes every attribute; a list removes only the named attributes.",
    )
    tag_name: Optional[str] = Field(
        None,
        alias="tagName",
        description="Replacement tag name. Defaults to a slug of the selector ending in `-stub`.",
    )


class Settings(BaseModel):
    """Settings for one serializer invocation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    verbose: bool = Field(True, description="Log invalid settings and contract violations.")
    debug: bool = Field(False, description="Log every pipeline step with its inputs.")

    remove_data_test: bool = Field(True, alias="removeDataTest")
    remove_data_testid: bool = Field(True, alias="removeDataTestid")
    remove_data_test_id: bool = Field(True, alias="removeDataTestId")
    remove_data_qa: bool = Field(False, alias="removeDataQa")
    remove_data_cy: bool = Field(False, alias="removeDataCy")
    remove_data_pw: bool = Field(False, alias="removeDataPw")
    remove_id_test: bool = Field(
        False, alias="removeIdTest", description="Remove `id` attributes whose value starts with `test`."
    )
    remove_class_test: bool = Field(
        False, alias="removeClassTest", description="Remove classes that start with `test`."
    )
    remove_server_rendered: bool = Field(
        True, alias="removeServerRendered", description="Remove `data-server-rendered` attributes."
    )
    remove_data_v_id: bool = Field(
        True, alias="removeDataVId", description="Remove scoped style `data-v-*` attributes."
    )
    remove_comments: bool = Field(False, alias="removeComments", description="Remove all HTML comments.")
    clear_inline_functions: bool = Field(
        False,
        alias="clearInlineFunctions",
        description="Replace attribute values that look like functions with `[function]`.",
    )

    attributes_to_clear: Tuple[str, ...] = Field(
        (), alias="attributesToClear", description="Attributes whose values are emptied."
    )
    attributes_not_to_stringify: Tuple[str, ...] = Field(
        ("style",),
        alias="attributesNotToStringify",
        description="Attributes left as rendered when live values are stringified.",
    )
    add_input_values: bool = Field(
        True,
        alias="addInputValues",
        description="Inject the live value of form controls. Requires a live component wrapper.",
    )
    stringify_attributes: bool = Field(
        True,
        alias="stringifyAttributes",
        description="Replace non-string bound values with a readable form. Requires a live component wrapper.",
    )
    sort_attributes: bool = Field(True, alias="sortAttributes")
    sort_classes: bool = Field(True, alias="sortClasses")

    stubs: Dict[str, StubSpec] = Field(
        default_factory=dict, description="CSS selector -> stub replacement, applied in order."
    )
    regex_to_remove_attributes: Optional[Pattern[str]] = Field(
        None,
        alias="regexToRemoveAttributes",
        description="Attributes whose name matches this pattern are removed.",
    )

    formatter: Union[Literal["none", "diffable"], Callable[..., Any]] = Field(
        "diffable", description="'none', 'diffable' or a function taking and returning markup."
    )
    post_processor: Optional[Callable[..., Any]] = Field(
        None, alias="postProcessor", description="Runs on the formatted markup; must return a string."
    )
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    @model_validator(mode="before")
    @classmethod
    def _drop_invalid_settings(cls, data: Any) -> Any:
        return clean_settings(data, cls.model_fields, FormattingConfig.model_fields)

"""
Tests for JSON Schema Contract Validators and config loading

Покрывает:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и enum
- format_spec_from_config / format_spec_to_config (явная форма и пресет локали)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.builder import FormatBuilder, format_spec_from_config, format_spec_to_config
from src.core.contracts import (
    LocaleFormatRequestValidator,
    NumberFormatSpecValidator,
    SchemaLoader,
    validate_locale_format_request,
    validate_number_format_spec,
)
from src.core.domain import (
    FormatLocale,
    FormatRole,
    IntegerGroupingType,
    NumberFieldPlacement,
    NumberFieldSpec,
    RoundingSpec,
    RoundingType,
    TextJustify,
)
from src.core.errors import InvalidArgumentError
from src.render import render_number


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_format_config():
    """Немецкий денежный формат в явной форме."""
    return {
        "decimal_separator": ",",
        "integer_grouping": {"separator": ".", "grouping_type": "Thousands"},
        "symbols": {
            "negative": {"trailing": "-", "trailing_placement": "InsideNumField"},
            "currency": {
                "trailing": " €",
                "trailing_placement": "InsideNumField",
                "currency_relative_position": "OutsideNumSign",
            },
        },
        "number_field": {"field_width": -1, "justification": "Right"},
    }


@pytest.fixture
def valid_locale_request():
    return {
        "locale": "US",
        "role": "Currency",
        "number_field": {"field_width": 20, "justification": "Right"},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["number_format_spec", "locale_format_request"])
    def test_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)

        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("number_format_spec") is loader.load_schema("number_format_spec")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(Path(tmp_path)).load_schema("broken")


# =============================================================================
# NUMBER FORMAT SPEC CONTRACT
# =============================================================================


class TestNumberFormatSpecContract:
    """Тесты схемы number_format_spec."""

    def test_valid(self, valid_format_config):
        validate_number_format_spec(valid_format_config)

    @pytest.mark.parametrize(
        "missing", ["decimal_separator", "integer_grouping", "symbols", "number_field"]
    )
    def test_required_fields(self, valid_format_config, missing):
        del valid_format_config[missing]

        with pytest.raises(ValidationError):
            validate_number_format_spec(valid_format_config)

    def test_empty_decimal_separator(self, valid_format_config):
        valid_format_config["decimal_separator"] = ""

        with pytest.raises(ValidationError):
            validate_number_format_spec(valid_format_config)

    def test_unknown_placement(self, valid_format_config):
        valid_format_config["symbols"]["negative"]["trailing_placement"] = "Inside"

        with pytest.raises(ValidationError):
            validate_number_format_spec(valid_format_config)

    def test_field_width_range(self, valid_format_config):
        valid_format_config["number_field"]["field_width"] = -2

        assert not NumberFormatSpecValidator().is_valid(valid_format_config)

    def test_additional_properties(self, valid_format_config):
        valid_format_config["color"] = "red"

        with pytest.raises(ValidationError):
            validate_number_format_spec(valid_format_config)

    def test_collect_errors(self, valid_format_config):
        valid_format_config["number_field"]["field_width"] = "wide"
        valid_format_config["integer_grouping"]["grouping_type"] = "Weekly"

        errors = NumberFormatSpecValidator().collect_errors(valid_format_config)

        assert len(errors) == 2
        assert errors[0].startswith("integer_grouping/grouping_type: ")
        assert errors[1].startswith("number_field/field_width: ")

    def test_collect_errors_valid(self, valid_format_config):
        assert NumberFormatSpecValidator().collect_errors(valid_format_config) == []


class TestLocaleFormatRequestContract:
    """Тесты схемы locale_format_request."""

    def test_valid(self, valid_locale_request):
        validate_locale_format_request(valid_locale_request)

    def test_number_field_optional(self):
        validate_locale_format_request({"locale": "France", "role": "SignedNumber"})

    def test_unknown_locale(self, valid_locale_request):
        valid_locale_request["locale"] = "Mars"

        assert not LocaleFormatRequestValidator().is_valid(valid_locale_request)

    def test_missing_role(self, valid_locale_request):
        del valid_locale_request["role"]

        with pytest.raises(ValidationError):
            validate_locale_format_request(valid_locale_request)


# =============================================================================
# CONFIG LOADING
# =============================================================================


class TestFormatSpecFromConfig:
    """Тесты format_spec_from_config / format_spec_to_config."""

    def test_explicit_form(self, valid_format_config):
        spec = format_spec_from_config(valid_format_config)

        assert spec.decimal_separator.text == ","
        assert spec.integer_grouping.grouping_type == IntegerGroupingType.THOUSANDS
        assert spec.symbols.currency_symbol.trailing_placement == NumberFieldPlacement.INSIDE
        assert render_number("-1000000.00", spec) == "1.000.000,00- €"

    def test_explicit_form_matches_locale(self, valid_format_config):
        from_config = format_spec_from_config(valid_format_config)
        from_locale = FormatBuilder().build_from_locale(
            FormatLocale.GERMANY, FormatRole.CURRENCY, NumberFieldSpec.auto_size()
        )

        assert from_config.equals(from_locale)

    def test_locale_form(self, valid_locale_request):
        spec = format_spec_from_config(valid_locale_request)

        assert spec.number_field.field_width == 20
        assert render_number(-5, spec) == "$ -5".rjust(20)

    def test_locale_form_default_field(self):
        spec = format_spec_from_config({"locale": "UK", "role": "Currency"})

        assert spec.number_field.is_auto_size()

    def test_schema_error_propagates(self, valid_format_config):
        valid_format_config["number_field"]["justification"] = "Diagonal"

        with pytest.raises(ValidationError):
            format_spec_from_config(valid_format_config)

    def test_semantic_error_raises_invalid_argument(self, valid_format_config):
        """Схема допускает символ без placement; сборка его отклоняет."""
        valid_format_config["symbols"]["positive"] = {"leading": "+"}

        with pytest.raises(InvalidArgumentError, match="no field placement"):
            format_spec_from_config(valid_format_config)

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError, match="'data' is None"):
            format_spec_from_config(None)

    def test_rounding(self, valid_format_config):
        valid_format_config["rounding"] = {"rounding_type": "HalfToEven", "fractional_digits": 2}

        spec = format_spec_from_config(valid_format_config)

        assert spec.rounding.equals(
            RoundingSpec(rounding_type=RoundingType.HALF_TO_EVEN, fractional_digits=2)
        )

    @pytest.mark.parametrize(
        "rounding",
        [
            {"rounding_type": "HalfToEven", "fractional_digits": -1},
            {"rounding_type": "Sideways"},
        ],
    )
    def test_invalid_rounding_raises_invalid_argument(self, monkeypatch, valid_format_config, rounding):
        """Модель RoundingSpec строже схемы или схема не загружена: ошибка с контекстом."""
        monkeypatch.setattr("src.builder.config.validate_number_format_spec", lambda data: None)
        valid_format_config["rounding"] = rounding

        with pytest.raises(InvalidArgumentError, match="invalid rounding spec") as exc_info:
            format_spec_from_config(valid_format_config)

        assert str(exc_info.value.context) == "format_spec_from_config() -> rounding"
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)

    def test_invalid_symbol_raises_invalid_argument(self, monkeypatch, valid_format_config):
        monkeypatch.setattr("src.builder.config.validate_number_format_spec", lambda data: None)
        valid_format_config["symbols"]["negative"]["trailing_placement"] = "Sideways"

        with pytest.raises(InvalidArgumentError, match="invalid symbol spec") as exc_info:
            format_spec_from_config(valid_format_config)

        assert str(exc_info.value.context) == "format_spec_from_config() -> symbols.negative"

    @pytest.mark.parametrize("locale", list(FormatLocale))
    @pytest.mark.parametrize("role", list(FormatRole))
    def test_round_trip(self, locale, role):
        spec = FormatBuilder().build_from_locale(
            locale, role, NumberFieldSpec.new(15, TextJustify.CENTER)
        )

        config = format_spec_to_config(spec)
        validate_number_format_spec(config)

        assert format_spec_from_config(config).equals(spec)

    def test_to_config_is_json_serializable(self):
        spec = FormatBuilder().build_pure_number_format(".", True, -1, TextJustify.LEFT)

        config = json.loads(json.dumps(format_spec_to_config(spec)))

        assert config["integer_grouping"] == {"separator": "", "grouping_type": "None"}
        assert config["symbols"]["negative"]["leading"] == "-"

"""Configuration validation utilities."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

INDEX_FIELDS = frozenset({"starting_value", "growth_scale", "noise_amplitude", "event_scale"})

# Smallest level that still rounds to a positive cent
MIN_STORED_VALUE = 0.005


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _section_error(params: Any) -> list[ValidationError]:
    if isinstance(params, Mapping):
        return []
    return [ValidationError(field="section", message="Must be a mapping", value=params)]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_index_params(name: str, params: Mapping[str, Any]) -> list[ValidationError]:
        """Validate random-walk parameters for one index."""
        errors = []
        prefix = f"indices.{name}"

        for unknown in sorted(set(params) - INDEX_FIELDS):
            errors.append(ValidationError(
                field=f"{prefix}.{unknown}",
                message="Unknown index parameter",
                value=params[unknown]
            ))

        value = params.get("starting_value")
        if not _is_number(value) or value < MIN_STORED_VALUE:
            errors.append(ValidationError(
                field=f"{prefix}.starting_value",
                message=f"Must be a number of at least {MIN_STORED_VALUE}",
                value=value
            ))

        value = params.get("noise_amplitude", 0.0)
        if not _is_number(value) or value < 0:
            errors.append(ValidationError(
                field=f"{prefix}.noise_amplitude",
                message="Must be a non-negative number",
                value=value
            ))

        for scale_field in ("growth_scale", "event_scale"):
            value = params.get(scale_field, 1.0)
            if not _is_number(value):
                errors.append(ValidationError(
                    field=f"{prefix}.{scale_field}",
                    message="Must be a finite number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_events(events: Any) -> list[ValidationError]:
        """Validate the scheduled event shocks."""
        errors = []

        if not isinstance(events, Sequence) or isinstance(events, str):
            return [ValidationError(field="events", message="Must be a list of events", value=events)]

        seen_months = set()
        for position, event in enumerate(events):
            if not isinstance(event, Mapping):
                errors.append(ValidationError(
                    field=f"events[{position}]",
                    message="Must be a mapping with month and impact",
                    value=event
                ))
                continue

            month = event.get("month")
            if not isinstance(month, int) or isinstance(month, bool) or not 0 <= month <= 11:
                errors.append(ValidationError(
                    field=f"events[{position}].month",
                    message="Must be an integer between 0 and 11",
                    value=month
                ))
            elif month in seen_months:
                errors.append(ValidationError(
                    field=f"events[{position}].month",
                    message="Only one event per month is allowed",
                    value=month
                ))
            else:
                seen_months.add(month)

            impact = event.get("impact")
            if not _is_number(impact):
                errors.append(ValidationError(
                    field=f"events[{position}].impact",
                    message="Must be a finite number",
                    value=impact
                ))

        return errors

    @staticmethod
    def validate_generator_params(params: Mapping[str, Any]) -> list[ValidationError]:
        """Validate synthetic series generator parameters."""
        errors = _section_error(params)
        if errors:
            return errors

        growth = params.get("target_annual_growth")
        if not _is_number(growth) or growth <= -1:
            errors.append(ValidationError(
                field="target_annual_growth",
                message="Must be a number greater than -1",
                value=growth
            ))

        for int_field in ("trading_days_per_year", "event_spread_days"):
            value = params.get(int_field)
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field=int_field,
                    message="Must be a positive integer",
                    value=value
                ))

        indices = params.get("indices")
        if not isinstance(indices, Mapping) or not indices:
            errors.append(ValidationError(
                field="indices",
                message="Must define at least one index",
                value=indices
            ))
            indices = {}
        else:
            for name, index_params in indices.items():
                if not isinstance(index_params, Mapping):
                    errors.append(ValidationError(
                        field=f"indices.{name}",
                        message="Must be a mapping of index parameters",
                        value=index_params
                    ))
                    continue
                errors.extend(ConfigValidator.validate_index_params(name, index_params))

        events = params.get("events", ())
        errors.extend(ConfigValidator.validate_events(events))

        # Return bounds only make sense once every input is well formed
        if not errors:
            errors.extend(ConfigValidator._validate_return_bounds(params))

        return errors

    @staticmethod
    def _validate_return_bounds(params: Mapping[str, Any]) -> list[ValidationError]:
        """Reject parameters whose worst trading day would wipe out an index."""
        errors = []

        base_growth = ((1 + params["target_annual_growth"])
                       ** (1 / params["trading_days_per_year"]) - 1)
        spread = params["event_spread_days"]
        per_day_impacts = [event["impact"] / spread for event in params.get("events", ())]

        for name, index_params in params["indices"].items():
            event_scale = index_params.get("event_scale", 1.0)
            worst_event = min([impact * event_scale for impact in per_day_impacts] + [0.0])
            worst_return = (base_growth * index_params.get("growth_scale", 1.0)
                            - index_params.get("noise_amplitude", 0.0) / 2
                            + worst_event)
            if worst_return <= -1:
                errors.append(ValidationError(
                    field=f"indices.{name}",
                    message="Worst-case daily return must stay above -100%",
                    value=worst_return
                ))
                continue

            # Every trading day of a year at the worst return must still store a cent
            worst_value = (index_params["starting_value"]
                           * (1 + worst_return) ** params["trading_days_per_year"])
            if worst_value < MIN_STORED_VALUE:
                errors.append(ValidationError(
                    field=f"indices.{name}",
                    message="Worst-case value after one year must stay at least one cent",
                    value=worst_value
                ))

        return errors

    @staticmethod
    def validate_currency_params(params: Mapping[str, Any]) -> list[ValidationError]:
        """Validate currency conversion parameters."""
        errors = _section_error(params)
        if errors:
            return errors

        value = params.get("usd_to_eur")
        if not _is_number(value) or value <= 0:
            errors.append(ValidationError(
                field="usd_to_eur",
                message="Must be a positive number",
                value=value
            ))

        return errors

    @staticmethod
    def validate_snapshot_params(params: Mapping[str, Any]) -> list[ValidationError]:
        """Validate bundled snapshot parameters."""
        errors = _section_error(params)
        if errors:
            return errors

        files = params.get("files")
        if not isinstance(files, Mapping) or not all(
                isinstance(name, str) and name for name in files.values()):
            errors.append(ValidationError(
                field="files",
                message="Must map index names to file names",
                value=files
            ))

        years = params.get("years")
        if not isinstance(years, Sequence) or not all(_is_positive_int(year) for year in years):
            errors.append(ValidationError(
                field="years",
                message="Must be a list of calendar years",
                value=years
            ))

        return errors

    @staticmethod
    def validate_config(config: Mapping[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("generator", ConfigValidator.validate_generator_params),
            ("currency", ConfigValidator.validate_currency_params),
            ("snapshots", ConfigValidator.validate_snapshot_params),
        )

        for section, validate in sections:
            if section not in config:
                continue
            for error in validate(config[section]):
                # A non-mapping section is reported under the section name itself
                field = section if error.field == "section" else f"{section}.{error.field}"
                errors.append(ValidationError(
                    field=field,
                    message=error.message,
                    value=error.value
                ))

        return errors

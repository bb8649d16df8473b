"""Bridge between API session payloads and the converter engine."""

from __future__ import annotations

from app.core.units.converter import BidirectionalConverter, ConversionSession, Side
from app.core.units.dimensions import Dimension
from app.models.schemas import SessionEvent, SessionModel


def session_from_model(model: SessionModel) -> ConversionSession:
    return ConversionSession(
        source_unit=model.source_unit,
        target_unit=model.target_unit,
        source_value=model.source_value,
        target_value=model.target_value,
        last_edited=Side(model.last_edited),
    )


def session_to_model(session: ConversionSession) -> SessionModel:
    return SessionModel(
        source_unit=session.source_unit,
        target_unit=session.target_unit,
        source_value=session.source_value,
        target_value=session.target_value,
        last_edited=session.last_edited.value,
    )


def new_session(dimension: Dimension) -> ConversionSession:
    return BidirectionalConverter.for_dimension(dimension).snapshot()


def apply_event(dimension: Dimension, session: ConversionSession, event: SessionEvent) -> ConversionSession:
    """Run one input event against ``session`` and return the updated state.

    Raises UnknownPresetError for a preset index the dimension does not have.
    """
    converter = BidirectionalConverter.for_dimension(dimension, session=session)

    if event.type == "edit_source":
        converter.edit_source(event.value)
    elif event.type == "edit_target":
        converter.edit_target(event.value)
    elif event.type == "set_source_unit":
        converter.set_source_unit(event.unit)
    elif event.type == "set_target_unit":
        converter.set_target_unit(event.unit)
    elif event.type == "swap":
        converter.swap()
    elif event.type == "reset":
        converter.reset()
    elif event.type == "preset":
        converter.apply_preset(dimension.get_preset(event.preset_index))

    return converter.session

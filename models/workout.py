"""
Workout document model.

These models are the single source of truth for the workout document: the
validator accepts exactly what they declare, and the JSON Schema sent to the
text generator is derived from them (see services.llm.schema).

Every model forbids unknown fields and is frozen once validated. Scalars are
strict, so "10" is not an integer and true is not a number (10.0 is still
accepted as the integer 10).
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, Strict, StringConstraints

# Matches PT#H#M#S (any subset, but in H -> M -> S order)
ISO_DURATION_PATTERN = r"^PT(?:([0-9]+)H)?(?:([0-9]+)M)?(?:([0-9]+)S)?$"

Duration = Annotated[str, Strict(), StringConstraints(pattern=ISO_DURATION_PATTERN)]
Text = Annotated[str, Strict()]
Number = Annotated[float, Strict()]
NonNegativeNumber = Annotated[float, Strict(), Field(ge=0)]


def _integral_float_to_int(value: Any) -> Any:
    """JSON does not distinguish 10 from 10.0; accept the latter as an integer."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


PositiveInt = Annotated[int, Strict(), Field(ge=1), BeforeValidator(_integral_float_to_int)]

DURATION_EXAMPLES = ["PT20S", "PT5M", "PT1H30M"]

WorkoutLevel = Literal["beginner", "intermediate", "advanced", "rx"]
LoadUnit = Literal["lb", "kg"]
PercentOf = Literal["1RM", "BW"]
DistanceUnit = Literal["m", "km", "mi"]
ScoreType = Literal["reps", "rounds", "time", "load", "calories", "distance"]


class DocumentModel(BaseModel):
    """Base for every node of the workout document."""

    model_config = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Leaf entities
# ---------------------------------------------------------------------------


class Load(DocumentModel):
    """Weight prescription either as absolute load with unit or a percent of 1RM/BW."""

    value: NonNegativeNumber = Field(description="Numeric load value (non-negative)")
    unit: Optional[LoadUnit] = Field(
        None, description="Load unit for absolute loads: pounds or kilograms"
    )
    percent_of: Optional[PercentOf] = Field(
        None,
        description="If present, value is a percentage (1-100) of 1RM or bodyweight",
    )


class Movement(DocumentModel):
    """
    A single exercise prescription.

    Provide reps, distance (+unit), calories, time, or load as appropriate;
    unused fields are null.
    """

    name: Text = Field(description="Exercise name (e.g., Pull-up, Row, Air Squat)")
    reps: Optional[PositiveInt] = Field(
        None, description="Repetitions for this movement; null if not applicable"
    )
    distance: Optional[NonNegativeNumber] = Field(
        None, description="Distance value; null if not applicable"
    )
    distance_unit: Optional[DistanceUnit] = Field(
        None, description="Unit for distance (meters, kilometers, miles); null if not applicable"
    )
    calories: Optional[PositiveInt] = Field(
        None, description="Calories for erg work; null if not applicable"
    )
    time: Optional[Duration] = Field(
        None,
        description="Time budget (ISO-8601); null if not applicable",
        examples=DURATION_EXAMPLES,
    )
    load: Optional[Load] = Field(
        None, description="Load prescription; null if bodyweight / not applicable"
    )
    tempo: Optional[Text] = Field(
        None, description="Tempo notation, e.g., 30X0; null if not applicable"
    )
    equipment: Optional[List[Text]] = Field(
        None, description="Equipment used; null if not applicable"
    )
    notes: Optional[Text] = Field(
        None, description="Coaching or scaling notes; null if not applicable"
    )
    scaling: Optional[List[Text]] = Field(
        None, description="Alternative versions for scaling; null if none"
    )


class Score(DocumentModel):
    """Scoring metadata for a block (tie-break/target/cap are null when not applicable)."""

    type: ScoreType = Field(description="Primary scoring domain for the block")
    tie_break: Optional[Text] = Field(
        None, description="Tie-break rule; null if not applicable"
    )
    target: Optional[Number] = Field(
        None, description="Target number (e.g., desired rounds/reps/time); null if none"
    )
    cap: Optional[Duration] = Field(
        None,
        description="Time cap for the block (ISO-8601); null if no cap",
        examples=DURATION_EXAMPLES,
    )


class EmomSlot(DocumentModel):
    """Work assigned to a minute pattern within an EMOM."""

    minute_mod: PositiveInt = Field(
        description=(
            "1-based minute selector (e.g., 1 for minute 1, 2 for minute 2, "
            "or modular pattern like every 3rd minute)"
        )
    )
    work: List[Movement] = Field(
        min_length=1, description="Movements to do on those minutes"
    )


class SetScheme(DocumentModel):
    """One sets x reps line item of a strength block."""

    sets: PositiveInt = Field(description="Number of sets in this line item")
    reps: PositiveInt = Field(description="Reps per set in this line item")
    load: Optional[Load] = Field(
        None, description="Load prescription per line item; null if not specified"
    )
    rpe: Optional[Annotated[float, Strict(), Field(ge=1, le=10)]] = Field(
        None, description="RPE (1-10); null if not specified"
    )
    rest: Optional[Duration] = Field(
        None,
        description="Rest between sets (ISO-8601); null if not specified",
        examples=DURATION_EXAMPLES,
    )


# ---------------------------------------------------------------------------
# Blocks (closed union discriminated by "type")
# ---------------------------------------------------------------------------


class BlockFields(DocumentModel):
    """Fields common to all workout blocks."""

    title: Text = Field(description="Human-friendly label for this block")
    notes: Optional[Text] = Field(
        None, description="Notes for this block; null if not applicable"
    )
    score: Optional[Score] = Field(
        None,
        description="Scoring; include when the block should be scored, null otherwise",
    )


class AmrapBlock(BlockFields):
    """Complete as many rounds/reps as possible within the duration."""

    model_config = ConfigDict(title="AMRAP")

    type: Literal["amrap"] = Field(description="Block kind")
    duration: Duration = Field(
        description="Total AMRAP duration (ISO-8601)", examples=DURATION_EXAMPLES
    )
    repeat: PositiveInt = Field(1, description="Repeat count (usually 1)")
    sequence: List[Movement] = Field(
        min_length=1, description="Ordered list of movements per round"
    )


class ForTimeBlock(BlockFields):
    """Complete prescribed work as fast as possible. Time cap is optional."""

    model_config = ConfigDict(title="ForTime")

    type: Literal["for_time"] = Field(description="Block kind")
    rounds: PositiveInt = Field(
        description="Number of rounds of the sequence (use 1 for chipper-style)"
    )
    time_cap: Optional[Duration] = Field(
        None,
        description="Time cap for the workout; null if no cap",
        examples=DURATION_EXAMPLES,
    )
    sequence: List[Movement] = Field(
        min_length=1, description="Ordered list of movements to complete"
    )


class EmomBlock(BlockFields):
    """Perform prescribed work at specified minutes within a total duration."""

    model_config = ConfigDict(title="EMOM")

    type: Literal["emom"] = Field(description="Block kind")
    minutes: PositiveInt = Field(description="Total EMOM length in minutes")
    slots: List[EmomSlot] = Field(
        min_length=1,
        description=(
            "Map minute patterns to work. Example: "
            "[{ minute_mod:1, work:[...] }, { minute_mod:2, work:[...] }]"
        ),
    )


class SetsBlock(BlockFields):
    """Strength block using sets x reps, optionally with load/RPE/rest."""

    model_config = ConfigDict(title="Sets")

    type: Literal["sets"] = Field(description="Block kind")
    exercise: Text = Field(
        description="Single primary exercise for the set scheme (never a combination)"
    )
    scheme: List[SetScheme] = Field(
        min_length=1, description="One or more set/reps prescriptions"
    )


class SupersetBlock(BlockFields):
    """Alternate two movements (A1/A2) for a number of sets."""

    model_config = ConfigDict(title="Superset")

    type: Literal["superset"] = Field(description="Block kind")
    sets: PositiveInt = Field(description="Number of A1/A2 sets")
    rest_between_sets: Optional[Duration] = Field(
        None,
        description="Rest after each A1/A2 pair (ISO-8601); null if not specified",
        examples=DURATION_EXAMPLES,
    )
    pair: List[Movement] = Field(
        min_length=2,
        max_length=2,
        description="Exactly two movements, performed alternately as A1 then A2",
    )


Block = Annotated[
    Union[AmrapBlock, ForTimeBlock, EmomBlock, SetsBlock, SupersetBlock],
    Field(discriminator="type"),
]

BLOCK_MODELS: Dict[str, Type[BlockFields]] = {
    "amrap": AmrapBlock,
    "for_time": ForTimeBlock,
    "emom": EmomBlock,
    "sets": SetsBlock,
    "superset": SupersetBlock,
}

BLOCK_TYPES = frozenset(BLOCK_MODELS)


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------


class Workout(DocumentModel):
    """A complete workout composed of one or more blocks."""

    id: Text = Field(description="Stable identifier for this workout")
    title: Text = Field(description="Display title (e.g., 'Cindy', 'Tuesday Metcon')")
    level: Optional[WorkoutLevel] = Field(
        None, description="Suggested difficulty level; null if unspecified"
    )
    tags: Optional[List[Text]] = Field(
        None, description="Tags for search/filter; null if none"
    )
    notes: Optional[Text] = Field(None, description="Coach notes; null if none")
    blocks: List[Block] = Field(
        min_length=1, description="One or more blocks comprising the workout"
    )
    warmup: Optional[List[Text]] = Field(
        None, description="Warm-up suggestions; null if none"
    )
    cooldown: Optional[List[Text]] = Field(
        None, description="Cool-down suggestions; null if none"
    )

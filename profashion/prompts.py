"""Photography brief assembly: framing rules, pose overrides and the full request text."""

import json

from profashion.catalog import FIXED_CAMERA_SETTINGS
from profashion.models import ConsistencyProfile, GarmentKind, GenerationConfig, Pose, ShotType

MACRO_FRAMING = (
    "MANDATORY FRAMING: MACRO / DETAIL SHOT. Focus EXCLUSIVELY on the specific body part "
    "or garment detail described. CROPPING OK."
)

SHOT_FRAMING: dict[ShotType, str] = {
    ShotType.FULL_BODY: (
        "CRITICAL FRAMING: FULL BODY SHOT. The ENTIRE subject from HEAD TO TOE must be visible. "
        "leave headroom and footroom. DO NOT CROP FEET."
    ),
    ShotType.UPPER_BODY: (
        "CRITICAL FRAMING: UPPER BODY SHOT. Frame from the HIPS/WAIST UP to the head. "
        "FOCUS on torso and face. DO NOT show legs."
    ),
    ShotType.LOWER_BODY: (
        "CRITICAL FRAMING: LOWER BODY SHOT. Frame from the WAIST DOWN to the feet. "
        "FOCUS on pants/skirt/shoes. DO NOT show head/shoulders."
    ),
}

HANDS_ON_HIPS_DESCRIPTION = (
    "Hands on hips/waist (Akimbo): both hands rest on the sides of the waist, elbows flaring out, "
    "torso straight and confident. No hands in pockets (skirts and dresses have no pockets)."
)

HEELS_MANDATE = (
    "SHOES: The model MUST wear elegant High Heels whose color matches the color palette of the skirt/dress."
)

NEGATIVE_PROMPT = (
    "low quality, ugly, distorted face, floating limbs, pasted on, sticker look, grey box on face, "
    "blurred face, flat lighting, no shadows, mismatched lighting, chromatic aberration, cartoonish, "
    "bad composition."
)

AUTO_DETECT = "Auto-detect"

BRIEF_TEMPLATE = """Role: Senior Fashion Photographer & High-End Retoucher.
Task: Generate a hyper-realistic fashion photograph with flawless compositing.

INPUTS:
- Model: Preserve identity (face, skin, body type) from the model image provided.
  **CRITICAL**: DO NOT use the face from the garment image (it has been masked out). Use the explicit Model image.
- Garments: Maintain texture and details.
- Background: Match lighting to the background image.

COMPOSITION:
- Framing: {framing}
- Pose Name: {pose_title}
- POSE DESCRIPTION (STRICTLY FOLLOW THIS): {pose_description}

LIGHTING & INTEGRATION (CRITICAL):
- LIGHTING MATCH: Analyze the background's light source (direction, temperature, softness) and apply the EXACT same lighting to the model's face and body.
- SHADOWS: Cast realistic, contact-grounding shadows on the floor/ground. The model MUST NOT look floating.
- REFLECTIONS: If the environment is reflective, show subtle reflections of the model.
- AMBIENT OCCLUSION: Add natural darkening in crevices and where the model touches the environment.
- COLOR GRADING: Harmonize the skin tones and garment colors with the background's ambient color palette.

ADAPTIVE LOGIC (HIGHEST PRIORITY):
1. SKIRT/DRESS DETECTION: IF the garment provided is a SKIRT or DRESS:
   - POSE OVERRIDE: IF the requested pose implies "hands in pockets", CHANGE IT to "Hands on hips/waist (Akimbo)". Skirts do not have pockets.
   - SHOES: The model MUST wear elegant High Heels.
   - SHOE COLOR: The High Heels MUST match the color palette of the skirt/dress.
{garment_rules}
BATCH CONSISTENCY (UNIFORM STYLING):
{consistency}

NEGATIVE PROMPT:
{negative}
{corrections}
SETTINGS:
{settings}
"""


def framing_instruction(pose: Pose, shot_type: ShotType) -> str:
    """Detail poses always crop tight; scene poses follow the chosen shot type."""
    if pose.category == "B":
        return MACRO_FRAMING
    return SHOT_FRAMING.get(shot_type, "Standard fashion composition.")


def is_skirt_or_dress(kind: GarmentKind | None) -> bool:
    return kind in (GarmentKind.SKIRT, GarmentKind.DRESS)


def pose_description(pose: Pose, garment_kind: GarmentKind | None) -> str:
    if pose.hands_in_pocket and is_skirt_or_dress(garment_kind):
        return HANDS_ON_HIPS_DESCRIPTION
    return pose.description


def camera_settings(config: GenerationConfig) -> dict:
    return {
        **FIXED_CAMERA_SETTINGS,
        "gender": config.gender or AUTO_DETECT,
        "race": config.ethnicity or AUTO_DETECT,
    }


def corrective_instruction(identity_failed: bool, lighting_failed: bool) -> str:
    issues = ""
    if identity_failed:
        issues += "Wrong Identity. "
    if lighting_failed:
        issues += "Bad Lighting. "
    return f"FIX ISSUES: {issues.strip()}" if issues else ""


def build_prompt(
    pose: Pose,
    config: GenerationConfig,
    profile: ConsistencyProfile,
    corrections: str = "",
) -> str:
    garment_rules = ""
    if is_skirt_or_dress(config.garment_kind):
        garment_rules = f"   - CONFIRMED: the garment IS a {config.garment_kind.value.upper()}. {HEELS_MANDATE}\n"

    return BRIEF_TEMPLATE.format(
        framing=framing_instruction(pose, config.shot_type),
        pose_title=pose.title,
        pose_description=pose_description(pose, config.garment_kind),
        garment_rules=garment_rules,
        consistency=profile.as_prompt(),
        negative=NEGATIVE_PROMPT,
        corrections=f"\n{corrections}\n" if corrections else "",
        settings=json.dumps(camera_settings(config)),
    )

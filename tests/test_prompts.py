import random

from conftest import make_config
from profashion.catalog import get_pose
from profashion.models import GarmentKind, ShotType
from profashion.profile import generate_profile
from profashion.prompts import (
    HANDS_ON_HIPS_DESCRIPTION,
    HEELS_MANDATE,
    MACRO_FRAMING,
    SHOT_FRAMING,
    build_prompt,
    corrective_instruction,
    framing_instruction,
)

PROFILE = generate_profile(random.Random(1))


def test_detail_pose_forces_macro_framing_over_full_body():
    config = make_config(pose_ids=("B2",), shot_type=ShotType.FULL_BODY)

    prompt = build_prompt(get_pose("B2"), config, PROFILE)

    assert MACRO_FRAMING in prompt
    assert SHOT_FRAMING[ShotType.FULL_BODY] not in prompt


def test_scene_pose_uses_selected_shot_type():
    for shot_type in ShotType:
        assert framing_instruction(get_pose("A1"), shot_type) == SHOT_FRAMING[shot_type]


def test_upper_body_framing_excludes_legs():
    assert "DO NOT show legs" in framing_instruction(get_pose("A4"), ShotType.UPPER_BODY)


def test_pose_description_is_used_verbatim():
    pose = get_pose("A3")
    assert pose.description in build_prompt(pose, make_config(pose_ids=("A3",)), PROFILE)


def test_skirt_replaces_pocket_pose_and_mandates_heels():
    pose = get_pose("A5")
    config = make_config(pose_ids=("A5",), garment_kind=GarmentKind.SKIRT)

    prompts = {build_prompt(pose, config, PROFILE) for _ in range(3)}

    assert len(prompts) == 1
    prompt = prompts.pop()
    assert HANDS_ON_HIPS_DESCRIPTION in prompt
    assert pose.description not in prompt
    assert HEELS_MANDATE in prompt


def test_dress_also_triggers_the_override():
    prompt = build_prompt(get_pose("B8"), make_config(pose_ids=("B8",), garment_kind=GarmentKind.DRESS), PROFILE)
    assert HANDS_ON_HIPS_DESCRIPTION in prompt


def test_trousers_keep_the_pocket_pose():
    pose = get_pose("A5")
    prompt = build_prompt(pose, make_config(pose_ids=("A5",), garment_kind=GarmentKind.TROUSERS), PROFILE)

    assert pose.description in prompt
    assert HEELS_MANDATE not in prompt


def test_skirt_leaves_non_pocket_pose_alone():
    pose = get_pose("A1")
    prompt = build_prompt(pose, make_config(garment_kind=GarmentKind.SKIRT), PROFILE)

    assert pose.description in prompt
    assert HEELS_MANDATE in prompt


def test_hints_default_to_auto_detect():
    prompt = build_prompt(get_pose("A1"), make_config(), PROFILE)
    assert '"gender": "Auto-detect"' in prompt
    assert '"race": "Auto-detect"' in prompt


def test_user_hints_reach_camera_settings():
    prompt = build_prompt(get_pose("A1"), make_config(gender="Female", ethnicity="East Asian"), PROFILE)
    assert '"gender": "Female"' in prompt
    assert '"race": "East Asian"' in prompt
    assert '"lens": "85mm Portrait Lens"' in prompt


def test_profile_and_negative_prompt_are_included():
    prompt = build_prompt(get_pose("A1"), make_config(), PROFILE)
    assert PROFILE.as_prompt() in prompt
    assert "NEGATIVE PROMPT" in prompt


def test_corrective_instruction_names_failed_checks():
    assert corrective_instruction(True, True) == "FIX ISSUES: Wrong Identity. Bad Lighting."
    assert corrective_instruction(False, True) == "FIX ISSUES: Bad Lighting."
    assert corrective_instruction(False, False) == ""


def test_corrections_are_appended_to_the_brief():
    prompt = build_prompt(get_pose("A1"), make_config(), PROFILE, "FIX ISSUES: Wrong Identity.")
    assert "FIX ISSUES: Wrong Identity." in prompt

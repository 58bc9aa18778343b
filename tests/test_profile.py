import random

from profashion.profile import FOOTWEAR_OPTIONS, HANDBAG_OPTIONS, JEWELRY_OPTIONS, generate_profile


def test_same_seed_gives_same_profile():
    assert generate_profile(random.Random(7)) == generate_profile(random.Random(7))


def test_every_tag_comes_from_its_option_set():
    for seed in range(20):
        profile = generate_profile(random.Random(seed))
        assert profile.jewelry in JEWELRY_OPTIONS
        assert profile.footwear in FOOTWEAR_OPTIONS
        assert profile.handbag in HANDBAG_OPTIONS


def test_each_option_set_offers_a_none_choice():
    assert any("No Jewelry" in option for option in JEWELRY_OPTIONS)
    assert any("No Handbag" in option for option in HANDBAG_OPTIONS)


def test_separate_batches_are_rerolled():
    profiles = {generate_profile() for _ in range(50)}
    assert len(profiles) > 1


def test_prompt_text_names_all_three_tags():
    profile = generate_profile(random.Random(3))
    text = profile.as_prompt()
    assert profile.jewelry in text
    assert profile.footwear in text
    assert profile.handbag in text

import asyncio
import random

import pytest

from conftest import FakeClient, image_response, make_config, make_encoded, make_image_bytes, studio_handler, text_response
from profashion.config import GENERATION_MODEL
from profashion.errors import GenerationFailure, NoImageProduced
from profashion.generator import MAX_ATTEMPTS, generate_one
from profashion.profile import generate_profile

PROFILE = generate_profile(random.Random(5))


def _sequenced(first: bytes, second: bytes, **verdicts):
    """Render `first`, then `second`; verifiers answer like studio_handler."""
    base = studio_handler(**verdicts)
    renders = iter([first, second])

    def handler(call):
        if call.model == GENERATION_MODEL:
            return image_response(next(renders))
        return base(call)

    return handler


def _run(client, config=None, **kwargs):
    return asyncio.run(generate_one("A1", config or make_config(), PROFILE, client=client, **kwargs))


def test_passing_checks_return_first_render():
    client = FakeClient(studio_handler())

    image = _run(client)

    assert len(client.generation_calls()) == 1
    assert image.mime_type == "image/png"


def test_failed_checks_retry_once_with_corrections():
    first = make_image_bytes(color=(1, 1, 1))
    second = make_image_bytes(color=(2, 2, 2))
    client = FakeClient(_sequenced(first, second, lighting=False, identity=False))

    image = _run(client)

    calls = client.generation_calls()
    assert len(calls) == MAX_ATTEMPTS == 2
    assert "FIX ISSUES" not in calls[0].prompt
    assert "FIX ISSUES: Wrong Identity. Bad Lighting." in calls[1].prompt
    assert image.data == second


def test_only_failed_check_is_named_in_corrections():
    client = FakeClient(studio_handler(lighting=False))

    _run(client)

    assert "FIX ISSUES: Bad Lighting." in client.generation_calls()[1].prompt
    assert "Wrong Identity" not in client.generation_calls()[1].prompt


def test_last_render_is_not_verified():
    client = FakeClient(studio_handler(identity=False))

    _run(client)

    # one lighting and one identity check, both for the first render
    assert len(client.calls_mentioning("Senior Art Director")) == 1
    assert len(client.calls_mentioning("Compare identity")) == 1


def test_verifier_error_counts_as_pass():
    base = studio_handler()

    def handler(call):
        if "Compare identity" in call.prompt:
            raise RuntimeError("verifier unavailable")
        return base(call)

    client = FakeClient(handler)

    _run(client)

    assert len(client.generation_calls()) == 1


def test_unparseable_verdict_counts_as_pass():
    base = studio_handler()

    def handler(call):
        if "Senior Art Director" in call.prompt:
            return text_response("looks fine to me")
        return base(call)

    client = FakeClient(handler)

    _run(client)

    assert len(client.generation_calls()) == 1


def test_strict_mode_rejects_a_failing_last_render():
    client = FakeClient(studio_handler(lighting=False))

    with pytest.raises(GenerationFailure):
        _run(client, strict=True)
    assert len(client.generation_calls()) == 2


def test_response_without_image_fails_without_retry():
    base = studio_handler()

    def handler(call):
        if call.model == GENERATION_MODEL:
            return text_response("I cannot render this.")
        return base(call)

    client = FakeClient(handler)

    with pytest.raises(NoImageProduced, match="No image generated."):
        _run(client)
    assert len(client.generation_calls()) == 1


def test_generation_error_is_wrapped():
    base = studio_handler()

    def handler(call):
        if call.model == GENERATION_MODEL:
            raise RuntimeError("503 overloaded")
        return base(call)

    with pytest.raises(GenerationFailure, match="503 overloaded"):
        _run(FakeClient(handler))


def test_unknown_pose_fails_before_any_request():
    client = FakeClient(studio_handler())

    with pytest.raises(GenerationFailure):
        asyncio.run(generate_one("Z9", make_config(), PROFILE, client=client))
    assert client.calls == []


def test_each_garment_is_checked_for_a_face():
    client = FakeClient(studio_handler())
    config = make_config(garments=(make_encoded(), make_encoded(color=(0, 0, 0)), make_encoded(color=(9, 9, 9))))

    _run(client, config)

    assert len(client.calls_mentioning("HUMAN FACE")) == 3


def test_generation_request_carries_every_input_image():
    client = FakeClient(studio_handler())
    config = make_config(garments=(make_encoded(), make_encoded(color=(0, 0, 0))))

    _run(client, config)

    call = client.generation_calls()[0]
    # prompt, model, two garments, background
    assert len(call.contents) == 5
    assert call.config.response_modalities == ["IMAGE"]
    assert call.config.image_config.aspect_ratio == "1:1"


def test_missing_background_is_omitted():
    client = FakeClient(studio_handler())

    _run(client, make_config(background=None))

    assert len(client.generation_calls()[0].contents) == 3
    lighting = client.calls_mentioning("Senior Art Director")[0]
    assert len(lighting.contents) == 2


def test_lighting_check_sees_the_background():
    client = FakeClient(studio_handler())

    _run(client)

    lighting = client.calls_mentioning("Senior Art Director")[0]
    assert len(lighting.contents) == 3
    assert "background scene" in lighting.prompt

"""
Unit tests for saferoom.processing.safety_signals
"""
import pytest
from saferoom.domain.constants import FALL_ASPECT_RATIO_THRESHOLD
from saferoom.domain.models import BoundingRectangle, DetectedObject
from saferoom.processing.safety_signals import aspect_ratio, compute_safety_signals, is_person


def _person(w, h, label="person"):
    return DetectedObject(label=label, rectangle=BoundingRectangle(x=0, y=0, w=w, h=h))


class TestIsPerson:
    """Tests for the loose person classifier"""

    @pytest.mark.parametrize("label", ["person", "Person", "PERSON", "person sitting", "a Person"])
    def test_matches_person_substring(self, label):
        assert is_person(DetectedObject(label=label)) is True

    @pytest.mark.parametrize("label", ["human", "man", "woman", "chair", "", None])
    def test_rejects_other_labels(self, label):
        assert is_person(DetectedObject(label=label)) is False

    def test_accepts_raw_vision_dicts(self):
        assert is_person({"object": "person", "rectangle": {"w": 1, "h": 1}}) is True
        assert is_person({"rectangle": {"w": 1, "h": 1}}) is False


class TestComputeSafetySignals:
    """Tests for compute_safety_signals"""

    def test_no_persons_means_no_count_and_no_fall(self):
        objects = [
            DetectedObject(label="couch", rectangle=BoundingRectangle(w=500, h=100)),
            DetectedObject(label="human", rectangle=BoundingRectangle(w=300, h=50)),
        ]
        signals = compute_safety_signals(objects)
        assert signals.people_count == 0
        assert signals.fall_risk is False

    def test_wide_person_is_fall_risk(self):
        signals = compute_safety_signals([_person(100, 50)])
        assert signals.people_count == 1
        assert signals.fall_risk is True

    def test_tall_person_is_not_fall_risk(self):
        signals = compute_safety_signals([_person(50, 100)])
        assert signals.people_count == 1
        assert signals.fall_risk is False

    def test_qualifying_person_last_still_triggers(self):
        objects = [_person(50, 100), _person(60, 120), DetectedObject(label="chair"), _person(150, 60)]
        signals = compute_safety_signals(objects)
        assert signals.people_count == 3
        assert signals.fall_risk is True

    def test_threshold_is_strict(self):
        signals = compute_safety_signals([_person(135, 100)])
        assert aspect_ratio(_person(135, 100)) == pytest.approx(FALL_ASPECT_RATIO_THRESHOLD)
        assert signals.fall_risk is False

    @pytest.mark.parametrize("objects", [None, []])
    def test_absent_or_empty_objects(self, objects):
        signals = compute_safety_signals(objects)
        assert signals.people_count == 0
        assert signals.fall_risk is False
        assert signals.voice_stress is False

    def test_voice_stress_always_false(self):
        for objects in ([_person(100, 50)], [_person(50, 100)], [DetectedObject(label="dog")]):
            assert compute_safety_signals(objects).voice_stress is False

    def test_missing_height_defaults_to_one(self):
        # w=2 / default h=1 -> 2.0
        signals = compute_safety_signals([_person(2, None)])
        assert signals.fall_risk is True

    def test_zero_height_defaults_to_one(self):
        signals = compute_safety_signals([_person(1, 0)])
        assert signals.fall_risk is False

    def test_missing_rectangle_is_not_fall_risk(self):
        signals = compute_safety_signals([DetectedObject(label="person", rectangle=None)])
        assert signals.people_count == 1
        assert signals.fall_risk is False

    def test_malformed_raw_fields_degrade_gracefully(self):
        objects = [
            {"object": "person", "rectangle": {"w": "wide", "h": None}},
            {"object": 42, "rectangle": {"w": 500, "h": 10}},
            {"object": "person"},
            {"object": "Person standing", "rectangle": {"w": 300, "h": 100}},
        ]
        signals = compute_safety_signals(objects)
        assert signals.people_count == 3
        assert signals.fall_risk is True

    def test_public_payload_excludes_people_count(self):
        payload = compute_safety_signals([_person(100, 50)]).public_payload()
        assert payload == {"fallRisk": True, "voiceStress": False}

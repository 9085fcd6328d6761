import asyncio
import io
import random
import threading
import time

import numpy as np
import pytest
from PIL import Image

from wastesort.classification.provider import ModelProvider, ModelState
from wastesort.classification.service import WasteClassifier
from wastesort.config.settings import ModelSettings, PixelSettings, Settings
from wastesort.domain.models import Bucket, ResultSource, WasteCategory


def solid(color, size=(80, 60)):
    return Image.new("RGB", size, color)


def png_bytes(color=(255, 230, 0), size=(40, 40)):
    buf = io.BytesIO()
    solid(color, size).save(buf, format="PNG")
    return buf.getvalue()


def fake_predictor(index, score=0.8):
    def predict(batch):
        probs = np.full((1, 1000), (1.0 - score) / 999, dtype=np.float32)
        probs[0, index] = score
        return probs
    return predict


def failing_loader():
    raise OSError("could not fetch weights")


@pytest.fixture
def pixel_only():
    return WasteClassifier(Settings(model=ModelSettings(enabled=False)), rng=random.Random(0))


def with_provider(loader, **settings):
    return WasteClassifier(Settings(**settings), provider=ModelProvider(loader), rng=random.Random(0))


class TestChain:

    def test_model_tier_answers_first(self):
        classifier = with_provider(lambda: fake_predictor(650))
        result = asyncio.run(classifier.classify(solid((255, 230, 0))))

        assert result.category is WasteCategory.HAZARDOUS
        assert result.source is ResultSource.MODEL
        assert result.confidence == pytest.approx(0.95)
        assert 2 <= len(result.items) <= 3

    def test_model_failure_falls_back_to_pixel(self):
        classifier = with_provider(failing_loader)
        result = asyncio.run(classifier.classify(solid((255, 230, 0))))

        assert result.source is ResultSource.PIXEL
        assert result.category is WasteCategory.WET
        assert classifier.provider.state is ModelState.FAILED

    def test_inference_error_falls_back_to_pixel(self):
        def predict(batch):
            raise RuntimeError("bad tensor")

        classifier = with_provider(lambda: predict)
        result = asyncio.run(classifier.classify(solid((192, 192, 192))))

        assert result.source is ResultSource.PIXEL
        assert result.bucket is Bucket.RECYCLABLE

    def test_low_model_score_falls_back_to_pixel(self):
        classifier = with_provider(
            lambda: fake_predictor(10, score=0.02),
            model=ModelSettings(min_score=0.1),
        )
        result = asyncio.run(classifier.classify(solid((15, 15, 15))))

        assert result.source is ResultSource.PIXEL
        assert result.category is WasteCategory.HAZARDOUS

    def test_pixel_only_has_no_provider(self, pixel_only):
        assert pixel_only.provider is None
        assert [t.name for t in pixel_only.tiers] == ["pixel", "default"]

    def test_pixel_tier_error_falls_back_to_default(self, pixel_only, monkeypatch):
        def explode(image):
            raise MemoryError("no room")

        monkeypatch.setattr(pixel_only.tiers[0], "attempt", explode)
        result = asyncio.run(pixel_only.classify(solid((255, 230, 0))))

        assert result.source is ResultSource.DEFAULT
        assert result.bucket is Bucket.GENERAL

    @pytest.mark.parametrize(
        "color",
        [(0, 0, 0), (255, 255, 255), (255, 230, 0), (192, 192, 192), (12, 200, 30), (10, 10, 250)],
    )
    def test_result_is_always_valid(self, pixel_only, color):
        result = asyncio.run(pixel_only.classify(solid(color)))
        assert result.category in set(WasteCategory)
        assert 0.0 <= result.confidence <= 1.0
        assert result.items
        assert len(result.recommendations) == 3

    def test_noise_image_is_valid(self, pixel_only):
        rng = np.random.default_rng(7)
        noise = Image.fromarray(rng.integers(0, 256, (64, 64, 3), dtype=np.uint8))
        result = asyncio.run(pixel_only.classify(noise))
        assert result.category in set(WasteCategory)


class TestDegenerateInput:

    def test_zero_area_image(self, pixel_only):
        result = asyncio.run(pixel_only.classify(Image.new("RGB", (0, 0))))
        assert result.source is ResultSource.DEFAULT
        assert result.category is WasteCategory.DRY
        assert result.confidence == pytest.approx(0.3)

    def test_none_image(self, pixel_only):
        assert asyncio.run(pixel_only.classify(None)).source is ResultSource.DEFAULT

    def test_zero_byte_input(self, pixel_only):
        result = asyncio.run(pixel_only.classify_bytes(b""))
        assert result.bucket is Bucket.GENERAL
        assert result.confidence == pytest.approx(0.3)

    def test_undecodable_input(self, pixel_only):
        result = asyncio.run(pixel_only.classify_bytes(b"\x89PNG not really"))
        assert result.source is ResultSource.DEFAULT

    def test_zero_area_skips_model(self):
        loader_calls = []

        def loader():
            loader_calls.append(1)
            return fake_predictor(1)

        classifier = with_provider(loader)
        result = asyncio.run(classifier.classify(Image.new("RGB", (0, 0))))
        assert result.source is ResultSource.DEFAULT
        assert loader_calls == []

    def test_decodable_bytes(self, pixel_only):
        result = asyncio.run(pixel_only.classify_bytes(png_bytes((192, 192, 192))))
        assert result.bucket is Bucket.RECYCLABLE

    def test_classify_path(self, pixel_only, tmp_path):
        path = tmp_path / "peel.png"
        path.write_bytes(png_bytes())
        result = asyncio.run(pixel_only.classify_path(path))
        assert result.category is WasteCategory.WET

    def test_unreadable_path(self, pixel_only, tmp_path):
        result = asyncio.run(pixel_only.classify_path(tmp_path / "gone.png"))
        assert result.source is ResultSource.DEFAULT


class TestLifecycle:

    def test_initialize_loads_model(self):
        classifier = with_provider(lambda: fake_predictor(1))
        assert asyncio.run(classifier.initialize()) is True
        assert classifier.provider.is_loaded

    def test_initialize_reports_failure(self):
        classifier = with_provider(failing_loader)
        assert asyncio.run(classifier.initialize()) is False

    def test_initialize_without_model(self, pixel_only):
        assert asyncio.run(pixel_only.initialize()) is False

    def test_seeded_classifiers_agree(self):
        settings = Settings(model=ModelSettings(enabled=False), seed=11)
        a = asyncio.run(WasteClassifier(settings).classify(solid((192, 192, 192))))
        b = asyncio.run(WasteClassifier(settings).classify(solid((192, 192, 192))))
        assert a == b

    def test_concurrent_first_calls_share_loaded_model(self):
        model = fake_predictor(300)
        started = threading.Barrier(2, timeout=5)
        calls = []

        def slow_loader():
            calls.append(1)
            try:
                started.wait()
            except threading.BrokenBarrierError:
                pass
            time.sleep(0.01)
            return model

        classifier = with_provider(slow_loader)

        async def both():
            return await asyncio.gather(
                classifier.classify(solid((255, 230, 0))),
                classifier.classify(solid((15, 15, 15))),
            )

        first, second = asyncio.run(both())

        assert first.source is ResultSource.MODEL
        assert second.source is ResultSource.MODEL
        assert classifier.provider.state is ModelState.LOADED
        assert classifier.provider.get() is model
        assert 1 <= len(calls) <= 2

    def test_concurrent_first_calls_both_fall_back(self):
        classifier = with_provider(failing_loader)

        async def both():
            return await asyncio.gather(
                classifier.classify(solid((255, 230, 0))),
                classifier.classify(solid((192, 192, 192))),
            )

        results = asyncio.run(both())

        assert [r.source for r in results] == [ResultSource.PIXEL, ResultSource.PIXEL]
        assert classifier.provider.state is ModelState.FAILED

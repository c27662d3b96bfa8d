"""Tests for asset loading and fallbacks."""

import logging
import math

import pytest

from cue import AssetNotFound, DirectoryLoader, SceneNode, build_fallback_subject, load_subject


class TestDirectoryLoader:
    """Test the filesystem-backed loader."""

    def test_missing_object(self, tmp_path):
        """Absent files raise AssetNotFound carrying the URL."""
        loader = DirectoryLoader(tmp_path)
        with pytest.raises(AssetNotFound) as info:
            loader.load_object("assets/cake.glb")
        assert info.value.url == "assets/cake.glb"

    def test_missing_texture(self, tmp_path):
        """Textures follow the same rule."""
        with pytest.raises(AssetNotFound):
            DirectoryLoader(tmp_path).load_texture("assets/city.jpg")

    def test_asset_not_found_is_lookup_error(self):
        """AssetNotFound can be caught as LookupError."""
        assert issubclass(AssetNotFound, LookupError)

    def test_loads_existing_object(self, tmp_path):
        """Existing files load as model nodes pointing at the file."""
        (tmp_path / "assets").mkdir()
        path = tmp_path / "assets" / "cake.glb"
        path.write_bytes(b"glTF")
        node = DirectoryLoader(tmp_path).load_object("assets/cake.glb")
        assert node.name == "cake"
        assert node.mesh.kind == "model"
        assert node.mesh.source == path

    def test_loads_existing_texture(self, tmp_path):
        """Existing images load as textures."""
        (tmp_path / "city.jpg").write_bytes(b"\xff\xd8")
        texture = DirectoryLoader(tmp_path).load_texture("city.jpg")
        assert texture.source == tmp_path / "city.jpg"

    def test_directory_is_not_an_asset(self, tmp_path):
        """A directory with the asset's name does not count."""
        (tmp_path / "cake.glb").mkdir()
        with pytest.raises(AssetNotFound):
            DirectoryLoader(tmp_path).load_object("cake.glb")


class TestFallbackSubject:
    """Test the built-in cake."""

    def test_structure(self):
        """Three layers, a plate and six candles with flames."""
        cake = build_fallback_subject()
        names = [child.name for child in cake.children]
        assert [n for n in names if n.startswith("layer")] == ["layer0", "layer1", "layer2"]
        assert "plate" in names
        assert sum(n.startswith("candle") for n in names) == 6
        assert sum(n.startswith("flame") for n in names) == 6

    def test_candles_form_a_ring(self):
        """Candles sit on a circle above the top layer, flames above them."""
        cake = build_fallback_subject()
        candles = [c for c in cake.children if c.name.startswith("candle")]
        flames = [c for c in cake.children if c.name.startswith("flame")]
        for candle, flame in zip(candles, flames):
            assert math.hypot(candle.position.x, candle.position.z) == pytest.approx(0.7)
            assert flame.position.y > candle.position.y

    def test_walk_visits_all(self):
        """walk yields the group and every child."""
        cake = build_fallback_subject()
        assert len(list(cake.walk())) == 1 + len(cake.children)

    def test_fresh_instance_each_call(self):
        """Each fallback is independent."""
        assert build_fallback_subject() is not build_fallback_subject()


class TestLoadSubject:
    """Test the primary-object fallback policy."""

    def test_missing_uses_fallback(self, loader, caplog):
        """A missing subject yields the cake and a warning."""
        with caplog.at_level(logging.WARNING):
            subject = load_subject(loader, "assets/cake.glb")
        assert subject is not None
        assert subject.name == "cake"
        assert "using fallback subject" in caplog.text

    def test_loaded_subject_is_framed(self, make_loader):
        """A loaded subject is scaled up and lifted."""
        node = SceneNode("model")
        subject = load_subject(make_loader({"m.glb": node}), "m.glb")
        assert subject is node
        assert subject.scale.as_tuple() == (1.2, 1.2, 1.2)
        assert subject.position.y == 0.1

    def test_load_error_uses_fallback(self, caplog):
        """A loader that fails outright still yields the cake."""

        class Corrupt:
            def load_object(self, url):
                raise ValueError("corrupt glb")

        with caplog.at_level(logging.WARNING):
            subject = load_subject(Corrupt(), "x")
        assert subject.name == "cake"
        assert "failed to load x" in caplog.text
        assert "corrupt glb" in caplog.text

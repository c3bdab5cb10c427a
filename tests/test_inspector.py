"""
Tests for probe report mapping and loading.
"""

import json

import pytest

from ffmpeg_toolkit.inspector import (
    load_probe_report,
    parse_chapter,
    parse_probe_report,
    parse_stream,
)
from ffmpeg_toolkit.models import (
    AudioStream,
    Chapter,
    DataStream,
    ProbeResult,
    SubtitleStream,
    VideoStream,
)
from ffmpeg_toolkit.utils import ProbeReportError


@pytest.fixture
def sample_ffprobe_output():
    """Sample ffprobe JSON output for testing."""
    return {
        "format": {
            "filename": "/path/to/video.mp4",
            "nb_streams": 4,
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "format_long_name": "QuickTime / MOV",
            "start_time": "0.000000",
            "duration": "120.500000",
            "size": "10485760",
            "bit_rate": "696320",
            "probe_score": 100,
            "tags": {"ENCODER": "Lavf60.3.100"},
        },
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "h264",
                "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
                "codec_tag_string": "avc1",
                "profile": "High",
                "width": 1920,
                "height": 1080,
                "coded_width": 1920,
                "coded_height": 1088,
                "display_aspect_ratio": "16:9",
                "pix_fmt": "yuv420p",
                "level": 40,
                "color_range": "tv",
                "color_space": "bt709",
                "color_transfer": "bt709",
                "color_primaries": "bt709",
                "chroma_location": "left",
                "field_order": "progressive",
                "r_frame_rate": "30000/1001",
                "avg_frame_rate": "30000/1001",
                "start_time": "0.000000",
                "duration": "120.500000",
                "bit_rate": "600000",
                "bits_per_raw_sample": "8",
                "tags": {"LANGUAGE": "und", "HANDLER_NAME": "VideoHandler"},
            },
            {
                "index": 1,
                "codec_type": "audio",
                "codec_name": "aac",
                "codec_long_name": "AAC (Advanced Audio Coding)",
                "codec_tag_string": "[0][0][0][0]",
                "profile": "LC",
                "sample_fmt": "fltp",
                "sample_rate": "48000",
                "channels": 2,
                "channel_layout": "stereo",
                "bits_per_sample": 0,
                "start_time": "0.021333",
                "duration": "120.000000",
                "bit_rate": "128000",
                "tags": {"language": "eng", "title": "English Audio"},
            },
            {
                "index": 2,
                "codec_type": "subtitle",
                "codec_name": "mov_text",
                "codec_tag_string": "tx3g",
                "duration": "120.500000",
                "tags": {"language": "eng", "title": "English Subtitles"},
            },
            {
                "index": 3,
                "codec_type": "data",
                "codec_name": "bin_data",
                "codec_tag_string": "gpmd",
            },
        ],
        "chapters": [
            {
                "id": 0,
                "time_base": "1/1000",
                "start": 0,
                "start_time": "0.000000",
                "end": 60000,
                "end_time": "60.000000",
                "tags": {"title": "Intro"},
            },
            {
                "id": 1,
                "time_base": "1/1000",
                "start": 60000,
                "start_time": "60.000000",
                "end": 120500,
                "end_time": "120.500000",
                "tags": {"Title": "Main"},
            },
        ],
    }


class TestParseProbeReport:
    """Test mapping of a complete report."""

    def test_format(self, sample_ffprobe_output):
        """Test container level fields."""
        result = parse_probe_report(sample_ffprobe_output)

        assert result.format == "mov,mp4,m4a,3gp,3g2,mj2"
        assert result.start == 0
        assert result.duration == 120500
        assert result.bitrate == 696320
        assert result.score == 100
        assert result.tags == {"encoder": "Lavf60.3.100"}

    def test_stream_variants_in_order(self, sample_ffprobe_output):
        """Test variant dispatch and ordering."""
        result = parse_probe_report(sample_ffprobe_output)

        assert [type(s) for s in result.streams] == [
            VideoStream,
            AudioStream,
            SubtitleStream,
            DataStream,
        ]
        assert [s.type for s in result.streams] == ["video", "audio", "subtitle", "data"]
        assert [s.index for s in result.streams] == [0, 1, 2, 3]

    def test_video_stream(self, sample_ffprobe_output):
        """Test video stream fields."""
        video = parse_probe_report(sample_ffprobe_output).primary_video

        assert video is not None
        assert video.codec == "h264"
        assert video.codec_long_name == "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10"
        assert video.codec_tag == "avc1"
        assert video.profile == "high"
        assert video.resolution == "1920x1080"
        assert video.coded_height == 1088
        assert video.aspect_ratio == "16:9"
        assert video.pixel_format == "yuv420p"
        assert video.level == 40
        assert video.color_space == "bt709"
        assert video.chroma_location == "left"
        assert video.field_order == "progressive"
        assert video.frame_rate == pytest.approx(29.97, rel=0.001)
        assert video.avg_frame_rate == pytest.approx(29.97, rel=0.001)
        assert video.duration == 120500
        assert video.bitrate == 600000
        assert video.bits_per_raw_sample == 8
        assert video.tags == {"language": "und", "handler_name": "VideoHandler"}

    def test_audio_stream(self, sample_ffprobe_output):
        """Test audio stream fields."""
        audio = parse_probe_report(sample_ffprobe_output).audio_streams[0]

        assert audio.codec == "aac"
        assert audio.codec_tag is None
        assert audio.profile == "lc"
        assert audio.sample_format == "fltp"
        assert audio.sample_rate == 48000
        assert audio.channels == 2
        assert audio.channel_layout_name == "stereo"
        assert audio.start == 21
        assert audio.duration == 120000
        assert audio.language == "eng"
        assert audio.title == "English Audio"

    def test_subtitle_and_data_streams(self, sample_ffprobe_output):
        """Test streams carrying only common fields."""
        result = parse_probe_report(sample_ffprobe_output)

        subtitle = result.subtitle_streams[0]
        assert subtitle.codec == "mov_text"
        assert subtitle.codec_tag == "tx3g"
        assert subtitle.codec_long_name is None
        assert subtitle.start == 0
        assert subtitle.title == "English Subtitles"

        data = result.data_streams[0]
        assert data.codec == "bin_data"
        assert data.codec_tag == "gpmd"
        assert data.bitrate == 0
        assert data.tags == {}

    def test_chapters(self, sample_ffprobe_output):
        """Test chapter mapping in microseconds."""
        chapters = parse_probe_report(sample_ffprobe_output).chapters

        assert chapters == [
            Chapter(id=0, start=0, end=60000000, tags={"title": "Intro"}),
            Chapter(id=1, start=60000000, end=120500000, tags={"title": "Main"}),
        ]
        assert chapters[1].title == "Main"

    def test_unwrap_returns_original(self, sample_ffprobe_output):
        """Test the escape hatch to the source report."""
        result = parse_probe_report(sample_ffprobe_output)

        assert result.unwrap() is sample_ffprobe_output
        assert result.unwrap()["format"]["size"] == "10485760"
        assert "_report" not in repr(result)

    def test_from_report(self, sample_ffprobe_output):
        """Test the classmethod constructor."""
        result = ProbeResult.from_report(sample_ffprobe_output)

        assert result == parse_probe_report(sample_ffprobe_output)
        assert result.unwrap() is sample_ffprobe_output

    def test_get_stream(self, sample_ffprobe_output):
        """Test lookup by stream index."""
        result = parse_probe_report(sample_ffprobe_output)

        assert isinstance(result.get_stream(1), AudioStream)
        assert result.get_stream(42) is None

    def test_empty_report(self):
        """Test that missing sections map to empty values."""
        result = parse_probe_report({})

        assert result.format == ""
        assert result.duration == 0
        assert result.score == 0
        assert result.tags == {}
        assert result.streams == []
        assert result.chapters == []
        assert result.primary_video is None


class TestParseStream:
    """Test mapping of individual streams."""

    def test_bare_video_stream(self):
        """Test a video stream with no recognizable fields."""
        stream = parse_stream({"codec_type": "video"})

        assert isinstance(stream, VideoStream)
        assert stream.frame_rate == -1
        assert stream.avg_frame_rate == -1
        assert stream.start == 0
        assert stream.duration == 0
        assert stream.index == 0
        assert stream.codec == ""
        assert stream.codec_long_name is None
        assert stream.codec_tag is None
        assert stream.profile is None
        assert stream.tags == {}

    @pytest.mark.parametrize("codec_type", ["attachment", "VIDEO", "", None])
    def test_unknown_type_is_data(self, codec_type):
        """Test the catch-all variant."""
        stream = parse_stream({"codec_type": codec_type, "codec_name": "ttf"})

        assert isinstance(stream, DataStream)
        assert stream.codec == "ttf"

    def test_non_mapping_entry(self):
        """Test that junk entries still map."""
        stream = parse_stream(None)

        assert isinstance(stream, DataStream)
        assert stream.index == 0

    def test_codec_tag_sentinel(self):
        """Test codec tag normalization."""
        assert parse_stream({"codec_tag_string": "[0][0][0][0]"}).codec_tag is None
        assert parse_stream({"codec_tag_string": "avc1"}).codec_tag == "avc1"

    def test_negative_index_wraps(self):
        """Test unsigned wraparound of the stream index."""
        assert parse_stream({"index": -1}).index == 4294967295

    def test_negative_generic_integers_floor(self):
        """Test that level and raw-sample bits keep their sign."""
        stream = parse_stream(
            {"codec_type": "video", "level": "-1", "bits_per_raw_sample": "-1.5"}
        )

        assert stream.level == -1
        assert stream.bits_per_raw_sample == -2

    def test_unknown_average_frame_rate(self):
        """Test the 0/0 rate ffprobe emits for unknown averages."""
        stream = parse_stream({"codec_type": "video", "avg_frame_rate": "0/0"})

        assert stream.avg_frame_rate == -1

    def test_pixel_format_fallback_key(self):
        """Test the alternate pixel format key."""
        stream = parse_stream({"codec_type": "video", "pixel_format": "yuv444p"})

        assert stream.pixel_format == "yuv444p"

    def test_frame_rate_zero_denominator(self):
        """Test infinity for a zero denominator."""
        stream = parse_stream({"codec_type": "video", "r_frame_rate": "25/0"})

        assert stream.frame_rate == float("inf")

    def test_tag_keys_lower_case(self):
        """Test tag key normalization."""
        stream = parse_stream({"codec_type": "audio", "tags": {"Title": "x"}})

        assert stream.tags == {"title": "x"}

    def test_channel_layout_name_fallback(self):
        """Test layout names derived from channel count."""
        stream = parse_stream({"codec_type": "audio", "channels": 6})

        assert stream.channel_layout_name == "5.1"


class TestParseChapter:
    """Test mapping of chapters."""

    def test_malformed_chapter(self):
        """Test sentinel values for a malformed chapter."""
        chapter = parse_chapter({"id": "x", "start_time": "N/A", "tags": None})

        assert chapter == Chapter(id=0, start=0, end=0, tags={})


class TestLoadProbeReport:
    """Test loading of saved reports."""

    def test_load_from_file(self, sample_ffprobe_output, tmp_path):
        """Test loading from a JSON file."""
        report_file = tmp_path / "report.json"
        report_file.write_text(json.dumps(sample_ffprobe_output))

        result = load_probe_report(report_file)

        assert result.format == "mov,mp4,m4a,3gp,3g2,mj2"
        assert len(result.streams) == 4
        assert result.unwrap() == sample_ffprobe_output

    def test_load_from_text(self, sample_ffprobe_output):
        """Test loading from JSON text."""
        result = load_probe_report(json.dumps(sample_ffprobe_output))

        assert len(result.chapters) == 2

    def test_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(ProbeReportError, match="Cannot read") as exc_info:
            load_probe_report(tmp_path / "missing.json")

        assert exc_info.value.source == tmp_path / "missing.json"

    def test_invalid_json(self):
        """Test loading invalid JSON."""
        with pytest.raises(ProbeReportError, match="Failed to parse"):
            load_probe_report("not json")

    def test_not_an_object(self):
        """Test loading a JSON array."""
        with pytest.raises(ProbeReportError, match="must be a JSON object"):
            load_probe_report("[]")

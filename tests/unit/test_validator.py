"""Tests for video URL and request validation."""

import pytest

from video_review.analyzer.validator import (
    extract_drive_file_id,
    is_valid_drive_url,
    is_valid_gcs_url,
    resolve_file_uri,
    validate_analysis_request,
)
from video_review.errors import AnalysisRequestError

DRIVE_URL = "https://drive.google.com/file/d/1AbC_dEf-123/view?usp=sharing"
GCS_URL = "gs://cloud-samples-data/generative-ai/video/pixel8.mp4"


class TestUrlChecks:
    def test_drive_urls(self):
        assert is_valid_drive_url(DRIVE_URL)
        assert is_valid_drive_url("https://drive.google.com/open?id=XYZ987")
        assert not is_valid_drive_url("https://drive.google.com/drive/folders/abc")
        assert not is_valid_drive_url("http://drive.google.com/file/d/abc")
        assert not is_valid_drive_url(None)

    def test_gcs_urls(self):
        assert is_valid_gcs_url(GCS_URL)
        assert not is_valid_gcs_url("gs://bucket-only")
        assert not is_valid_gcs_url("https://storage.googleapis.com/b/v.mp4")
        assert not is_valid_gcs_url(42)


class TestDriveFileId:
    def test_path_form(self):
        assert extract_drive_file_id(DRIVE_URL) == "1AbC_dEf-123"

    def test_query_form(self):
        assert extract_drive_file_id("https://drive.google.com/open?id=XYZ987") == "XYZ987"

    def test_missing_id(self):
        with pytest.raises(AnalysisRequestError) as exc_info:
            extract_drive_file_id("https://drive.google.com/drive/my-drive")
        assert exc_info.value.status_code == 400


class TestResolveFileUri:
    def test_drive_becomes_direct_download(self):
        assert resolve_file_uri(DRIVE_URL) == (
            "https://drive.google.com/uc?export=download&id=1AbC_dEf-123"
        )

    def test_drive_without_id_kept(self):
        url = "https://drive.google.com/drive/my-drive"
        assert resolve_file_uri(url) == url

    def test_gcs_passes_through(self):
        assert resolve_file_uri(GCS_URL) == GCS_URL


class TestValidateAnalysisRequest:
    def test_valid(self):
        validate_analysis_request(DRIVE_URL, ["Talking head"])
        validate_analysis_request(GCS_URL, None)

    def test_missing_url(self):
        with pytest.raises(AnalysisRequestError, match="Video URL is required"):
            validate_analysis_request("", [])

    def test_unsupported_url(self):
        with pytest.raises(AnalysisRequestError, match="Invalid URL format"):
            validate_analysis_request("https://youtube.com/watch?v=abc", [])

    def test_criteria_must_be_list(self):
        with pytest.raises(AnalysisRequestError) as exc_info:
            validate_analysis_request(GCS_URL, "Talking head")
        assert exc_info.value.to_envelope() == {
            "status": "error",
            "statusCode": 400,
            "message": "Custom criteria must be an array",
        }

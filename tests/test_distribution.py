import io
from datetime import datetime, timezone

import pytest

from publish_core.distribution.directive import resolve_publish_directive
from publish_core.distribution.models import PublishRequest
from publish_core.distribution.youtube import YouTubeUploader, build_video_body
from publish_core.errors import MissingCredentials, PublishFailure
from publish_core.ingestion.models import MediaSource


@pytest.fixture
def mock_config_manager(mocker):
    mock = mocker.Mock()
    mock.distribution.client_id = "client-id"
    mock.distribution.client_secret = "client-secret"
    mock.distribution.refresh_token = "refresh-token"
    mock.distribution.token_uri = "https://oauth2.googleapis.com/token"
    mock.distribution.watch_url_base = "https://www.youtube.com/watch?v="
    mock.distribution.upload_chunk_size = -1
    return mock


@pytest.fixture
def sample_request():
    return PublishRequest(
        title="Title",
        description="Desc",
        tags=("Tag", "#tag"),
        classification_code="28",
        language="en",
        directive=resolve_publish_directive("enabled", datetime(2024, 6, 1, 10, tzinfo=timezone.utc)),
    )


@pytest.fixture
def sample_media():
    return MediaSource(label="vid.mp4", stream=io.BytesIO(b"data"), mimetype="video/mp4")


def test_video_body(sample_request):
    body = build_video_body(sample_request)
    assert body["snippet"] == {
        "title": "Title",
        "description": "Desc",
        "tags": ["Tag", "#tag"],
        "categoryId": "28",
        "defaultLanguage": "en",
        "defaultAudioLanguage": "en",
    }
    assert body["status"]["privacyStatus"] == "private"
    assert body["status"]["publishAt"] == "2024-06-01T10:00:00.000Z"


def test_youtube_upload_flow(mocker, mock_config_manager, sample_request, sample_media):
    mocker.patch("publish_core.distribution.youtube.MediaIoBaseUpload")

    uploader = YouTubeUploader(mock_config_manager)
    uploader.service = mocker.Mock()

    mock_request = mocker.Mock()
    mock_request.next_chunk.return_value = (None, {"id": "abc123"})
    uploader.service.videos.return_value.insert.return_value = mock_request

    result = uploader.upload(sample_request, sample_media)

    assert result.external_id == "abc123"
    assert result.external_url == "https://www.youtube.com/watch?v=abc123"
    assert result.scheduled_publish_at == "2024-06-01T10:00:00.000Z"
    _, kwargs = uploader.service.videos.return_value.insert.call_args
    assert kwargs["part"] == "snippet,status"
    mock_request.next_chunk.assert_called_once()


def test_upload_authenticates_lazily(mocker, mock_config_manager, sample_request, sample_media):
    mock_build = mocker.patch("publish_core.distribution.youtube.build")
    mock_creds = mocker.patch("publish_core.distribution.youtube.Credentials")
    mocker.patch("publish_core.distribution.youtube.MediaIoBaseUpload")
    mock_build.return_value.videos.return_value.insert.return_value.next_chunk.return_value = (None, {"id": "x"})

    YouTubeUploader(mock_config_manager).upload(sample_request, sample_media)

    mock_creds.assert_called_once()
    assert mock_creds.call_args.kwargs["refresh_token"] == "refresh-token"
    mock_build.assert_called_once()


def test_missing_credentials(mock_config_manager, sample_request, sample_media):
    mock_config_manager.distribution.refresh_token = None
    uploader = YouTubeUploader(mock_config_manager)
    with pytest.raises(MissingCredentials):
        uploader.upload(sample_request, sample_media)


def test_missing_video_id_is_a_failure(mocker, mock_config_manager, sample_request, sample_media):
    mocker.patch("publish_core.distribution.youtube.MediaIoBaseUpload")
    uploader = YouTubeUploader(mock_config_manager)
    uploader.service = mocker.Mock()
    uploader.service.videos.return_value.insert.return_value.next_chunk.return_value = (None, {})

    with pytest.raises(PublishFailure, match="missing video ID"):
        uploader.upload(sample_request, sample_media)


def test_api_error_is_wrapped_without_retry(mocker, mock_config_manager, sample_request, sample_media):
    from googleapiclient.errors import HttpError

    mocker.patch("publish_core.distribution.youtube.MediaIoBaseUpload")
    uploader = YouTubeUploader(mock_config_manager)
    uploader.service = mocker.Mock()
    insert = uploader.service.videos.return_value.insert.return_value
    insert.next_chunk.side_effect = HttpError(mocker.Mock(status=403, reason="Forbidden"), b"quota")

    with pytest.raises(PublishFailure):
        uploader.upload(sample_request, sample_media)
    assert insert.next_chunk.call_count == 1

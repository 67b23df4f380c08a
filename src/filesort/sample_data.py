"""Demonstration batch used by ``filesort --demo``."""

from __future__ import annotations

from typing import List

DEMO_FILENAMES: tuple[str, ...] = (
    # documents
    "project_proposal.docx",
    "technical_specification.pdf",
    "meeting_minutes.txt",
    "user_manual.doc",
    "requirements_document.rtf",
    # images
    "corporate_logo.png",
    "presentation_slide.jpg",
    "infographic_design.gif",
    "website_banner.jpeg",
    "icon_collection.bmp",
    # audio
    "conference_recording.mp3",
    "podcast_episode.wav",
    "training_audio.flac",
    "notification_sound.aac",
    # video
    "training_video.mp4",
    "presentation_demo.avi",
    "tutorial_content.mkv",
    "promotional_video.mov",
    # archives
    "backup_archive.zip",
    "software_package.rar",
    "data_backup.7z",
    "system_files.tar",
    # source code
    "main_application.cpp",
    "utility_functions.c",
    "data_processor.py",
    "web_interface.html",
    "style_definitions.js",
    # unrecognized
    "readme_file",
    "configuration.ini",
    "database_schema.sql",
    "log_entries.log",
    "system_preferences.cfg",
)


def demo_filenames() -> List[str]:
    return list(DEMO_FILENAMES)

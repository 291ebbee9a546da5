"""ScrollDown moment play-by-play client."""

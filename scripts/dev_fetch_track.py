#!/usr/bin/env python3
"""Manual script to test a MyRadio track lookup (needs MYRADIO_API_KEY)."""

from myradio.session import Session
from myradio.tracks import get_track

if __name__ == "__main__":
    with Session.from_env() as session:
        track = get_track(session, 1)
        print(track)
        print(track.get_album(session))

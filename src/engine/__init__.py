"""Playback engine: queue, transition function, schedulers and the animator"""

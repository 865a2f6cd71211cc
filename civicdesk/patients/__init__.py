"""Doctors, patients and diagnosis updates."""
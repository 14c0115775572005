"""
Bache Monitor: pothole depth detections from an ultrasonic sensor.

This package contains the FastAPI app entry point (main.py), the detection
API routes, domain logic (severity, normalization), infrastructure (MongoDB,
HTTP feed client, serial bridge) and the terminal dashboard.
"""

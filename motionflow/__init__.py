"""IMU orientation estimation, quaternion helpers, integer data-flow steps and calibration sequencing."""

__version__ = "0.1.0"
"""
Anomaly detection for KPI series, flagging periods whose z-score exceeds a configurable threshold.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import Anomaly, detect_anomalies

__all__ = ["Anomaly", "detect_anomalies"]

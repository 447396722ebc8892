import csv
import time
import os

from .config import LOG_INTERVAL


class DataLogger:
    """
    Logs heat deposits to a CSV file.
    """
    HEADER = ["Timestamp", "Elapsed_Sec", "X", "Y", "Alpha", "Peak_Heat"]

    def __init__(self, filename="heat_session_log.csv", log_interval=LOG_INTERVAL):
        self.filename = filename
        self.start_time = time.time()
        self.last_log_time = 0
        self.log_interval = log_interval

        # Create file and write header if it doesn't exist
        if not os.path.exists(self.filename):
            with open(self.filename, 'w', newline='') as f:
                writer = csv.writer(f)
                writer.writerow(self.HEADER)

    def log(self, x, y, alpha, peak_heat):
        """
        Log one deposit if the interval has passed. Returns True if a row was written.
        """
        current_time = time.time()
        if current_time - self.last_log_time < self.log_interval:
            return False

        elapsed = round(current_time - self.start_time, 2)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(current_time))

        with open(self.filename, 'a', newline='') as f:
            writer = csv.writer(f)
            writer.writerow([timestamp, elapsed, x, y, alpha, peak_heat])

        self.last_log_time = current_time
        return True

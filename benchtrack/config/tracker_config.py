from typing import List, Optional

from benchtrack.config.suite import Suite


class TrackerConfig:
    data_file: str
    repo_url: str
    max_items_in_chart: Optional[int]
    alert_threshold: float
    fail_threshold: float
    fail_on_alert: bool
    output_dir: str
    log_file: Optional[str]
    suites: List[Suite]

    def get_suite(self, name: str) -> Optional[Suite]:
        for suite in self.suites:
            if suite.name == name:
                return suite
        return None

    def __str__(self):
        return (f"TrackerConfig(\n"
                f"  data_file={self.data_file},\n"
                f"  repo_url={self.repo_url},\n"
                f"  max_items_in_chart={self.max_items_in_chart},\n"
                f"  alert_threshold={self.alert_threshold},\n"
                f"  fail_threshold={self.fail_threshold},\n"
                f"  fail_on_alert={self.fail_on_alert},\n"
                f"  output_dir={self.output_dir},\n"
                f"  suites={[suite.name for suite in self.suites]}\n"
                f")")

#!/usr/bin/env python3
import logging, sys
from config.logging_config import configure
from smarthome.services.bootstrap import build_default_home, simulate_day

def main():
    configure()
    home = build_default_home()
    simulate_day(home)
    status = home.registry.status()
    log = logging.getLogger("main")
    log.info("temperature %sC │ users %d │ active devices %d",
             status.temperature, status.users_at_home, status.active_devices)
    for device in home.registry.device_statuses():
        log.info("%-20s %s", device.name, device.describe())

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("🌙  graceful shutdown")

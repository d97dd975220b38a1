"""
SimpleCalc Web Portal Launcher
Simple script to start the web server on its own
"""
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

print("Starting SimpleCalc Web Portal...")
print()

try:
    import api
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("\nMake sure you have installed the required dependencies:")
    print("  pip install -e .")
    sys.exit(1)

try:
    api.main()
except OSError as e:
    print(f"Error starting server: {e}")
    print("\nTroubleshooting:")
    print("1. Check if another application is using the port")
    print(f"2. Change WEB_PORT in config.py (currently {api.config.WEB_PORT})")
    sys.exit(1)

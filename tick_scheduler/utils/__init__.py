"""
Utility modules
"""

from .input_parser import ProcessInput, DEMO_PROCESSES, create_process_objects, load_demo_processes
from .config import SimulationConfig

__all__ = ['ProcessInput', 'DEMO_PROCESSES', 'create_process_objects', 'load_demo_processes',
           'SimulationConfig']

from burstnet.io.export.results import (
    result_stem,
    spikes_stem,
    write_applied_current,
    write_simulation_outputs,
    write_spike_train_matlab,
    write_spike_train_text,
    write_state_matrix,
)
from burstnet.io.export.run_manifest import (
    config_to_dict,
    summarize_result,
    write_run_config,
    write_run_summary,
)

__all__ = [
    "config_to_dict",
    "result_stem",
    "spikes_stem",
    "summarize_result",
    "write_applied_current",
    "write_run_config",
    "write_run_summary",
    "write_simulation_outputs",
    "write_spike_train_matlab",
    "write_spike_train_text",
    "write_state_matrix",
]

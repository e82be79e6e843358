"""
Training configuration for the Bullet Dodge environment
Reward shaping variants plus algorithm hyperparameters
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training - it's too slow with parallel envs
    "width": 800,
    "height": 600,
    "dt": 1/30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "k_projectiles": 8,
    "auto_difficulty": True,
    "initial_difficulty": 1.0,
    "danger_radius": 120.0,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Reward Config 1: BASELINE (survival time only)
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Reward survival time, penalize getting hit",
    "R_ALIVE": 1.0,      # Reward per second survived
    "R_DEATH": 5.0,      # Collision penalty
    "R_PROXIMITY": 0.0,  # No shaping on near misses
}

# Reward Config 2: CAUTIOUS (keep distance from incoming projectiles)
REWARD_CONFIG_CAUTIOUS = {
    "name": "cautious",
    "description": "Survival reward plus a penalty for letting projectiles get close",
    "R_ALIVE": 1.0,
    "R_DEATH": 10.0,     # Higher collision penalty
    "R_PROXIMITY": 0.02, # Per-step penalty scaled by closeness of the nearest projectile
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "cautious": REWARD_CONFIG_CAUTIOUS,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}

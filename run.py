from datetime import datetime, timezone
import os
import time

import hydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from biomorph.config import SessionConfig
from biomorph.evolution.population import Population
from biomorph.render.plot import MatplotlibRenderer
from biomorph.session import EvolutionSession
from biomorph.utils.logger_setup import setup_logger


def log_population(population: Population, generation: int) -> None:
    logger.info(f"Generation {generation}:")
    for index, biomorph in enumerate(population):
        box = biomorph.bounding_box()
        logger.info(
            "  [{}] genes={} segments={} box={}..{}",
            index,
            list(biomorph.genes),
            len(biomorph.segments),
            box.min[:2],
            box.max[:2],
        )


def run_session(config: SessionConfig) -> EvolutionSession:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("Biomorph Evolution")
    logger.info("=" * 80)
    logger.info(f"Grid: {config.grid.rows}x{config.grid.columns}")
    logger.info(f"Seed: {config.seed if config.seed is not None else 'random'}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")
    logger.info("")

    renderer = MatplotlibRenderer(config.render) if config.render.enabled else None
    session = EvolutionSession(config)
    try:
        population = session.generate()
        log_population(population, session.generation)
        if renderer is not None:
            renderer.save(population, _render_path(config, session.generation))

        for _ in range(config.generations):
            population = session.develop()
            log_population(population, session.generation)
            if renderer is not None:
                renderer.save(population, _render_path(config, session.generation))
    except KeyboardInterrupt:
        logger.info("Evolution interrupted by user")
    finally:
        if renderer is not None:
            renderer.close()
        duration = time.time() - start_time
        logger.info(f"Generations developed: {session.generation}")
        logger.info(f"Total duration: {duration:.2f} seconds")
        logger.info("=" * 80)
    return session


def _render_path(config: SessionConfig, generation: int) -> str:
    return os.path.join(config.render.output_dir, f"generation_{generation:04d}.png")


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    config = SessionConfig.model_validate(OmegaConf.to_container(cfg, resolve=True))

    log_file_path = setup_logger(
        log_dir=config.logging.log_dir,
        level=config.logging.level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
    )
    logger.info(
        "Working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    run_session(config)


if __name__ == "__main__":
    main()

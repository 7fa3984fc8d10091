"""
Flask应用主入口
采用应用工厂模式，しりとり裁判服务
"""
import logging
from datetime import datetime
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config, config
from api.routes import api_bp, GAME_EXTENSION_KEY
from services.game_service import shiritori_game


def setup_logging(level: str = 'INFO', log_file: str = '') -> None:
    """配置日志系统"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def create_app(config_obj: Optional[Config] = None, game=None) -> Flask:
    """
    应用工厂函数

    Args:
        config_obj: 配置对象，如果为None则使用默认配置
        game: 游戏实例，如果为None则使用全局游戏

    Returns:
        Flask应用实例
    """
    cfg = config_obj or config
    cfg.validate()

    # 设置日志
    setup_logging(cfg.LOG_LEVEL, cfg.LOG_FILE)
    logger = logging.getLogger(__name__)

    # 创建Flask应用
    app = Flask(__name__)
    app.config.from_object(cfg)
    app.json.ensure_ascii = False

    # 配置CORS
    if cfg.CORS_ORIGINS == '*':
        CORS(app)
        logger.warning("⚠ CORS允许所有源，生产环境请设置CORS_ORIGINS")
    else:
        CORS(app, origins=cfg.CORS_ORIGINS.split(','))
        logger.info(f"✓ CORS配置完成: {cfg.CORS_ORIGINS}")

    app.extensions[GAME_EXTENSION_KEY] = game or shiritori_game

    # 注册蓝图
    app.register_blueprint(api_bp)
    logger.info("✓ API蓝图注册完成")

    # 健康检查端点
    @app.route("/health")
    def health():
        return jsonify({
            "status": "healthy",
            "service": "Shiritori Referee",
            "timestamp": datetime.now().isoformat()
        })

    logger.info("=" * 50)
    logger.info("しりとり服务启动成功")
    logger.info(f"服务器地址: http://{cfg.HOST}:{cfg.PORT}")
    logger.info(f"调试模式: {cfg.DEBUG}")
    logger.info("=" * 50)

    return app


def main():
    """主函数"""
    app = create_app()
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=config.DEBUG
    )


if __name__ == "__main__":
    main()

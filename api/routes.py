"""
API路由定义
处理/shiritori与/reset端点的请求
"""
import logging
from flask import Blueprint, Response, current_app, jsonify, request

from services.game_service import ShiritoriGame, ValidationOutcome


logger = logging.getLogger(__name__)

# 创建蓝图
api_bp = Blueprint('api', __name__)

GAME_EXTENSION_KEY = 'shiritori_game'


def _game() -> ShiritoriGame:
    return current_app.extensions[GAME_EXTENSION_KEY]


def _plain_text(text: str) -> Response:
    return Response(text, content_type='text/plain; charset=utf-8')


def _render_outcome(outcome: ValidationOutcome):
    if outcome.accepted:
        return _plain_text(outcome.word)
    return jsonify({
        "errorMessage": outcome.error.message,
        "errorCode": outcome.error.code
    }), 400


@api_bp.before_app_request
def log_request() -> None:
    logger.info(f"{request.method} {request.path}")


@api_bp.route('/shiritori', methods=['GET'])
def get_current_word():
    """返回当前（最后一个）单词"""
    try:
        return _plain_text(_game().current())
    except Exception as e:
        logger.error(f"获取当前单词时发生错误: {e}", exc_info=True)
        return jsonify({"error": f"服务器内部错误: {str(e)}"}), 500


@api_bp.route('/shiritori', methods=['POST'])
def post_next_word():
    """
    提交下一个单词

    请求体:
        {
            "nextWord": "单词（平假名或片假名）"
        }

    返回:
        成功时返回接受的单词（纯文本）
        失败时返回 {"errorMessage": ..., "errorCode": ...}，状态码400
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or "nextWord" not in data:
            return jsonify({"error": "缺少nextWord参数"}), 400

        next_word = data["nextWord"]

        # 验证单词类型
        if not isinstance(next_word, str):
            return jsonify({"error": "nextWord参数必须是字符串类型"}), 400

        # 验证单词长度
        max_length = current_app.config['MAX_WORD_LENGTH']
        if len(next_word) > max_length:
            return jsonify({
                "error": f"单词过长，最大长度为{max_length}字符"
            }), 400

        return _render_outcome(_game().submit(next_word))

    except Exception as e:
        logger.error(f"处理请求时发生错误: {e}", exc_info=True)
        return jsonify({"error": f"服务器内部错误: {str(e)}"}), 500


@api_bp.route('/reset', methods=['POST'])
def reset_game():
    """重置游戏，返回新的初始单词"""
    try:
        return _plain_text(_game().reset())
    except Exception as e:
        logger.error(f"重置游戏时发生错误: {e}", exc_info=True)
        return jsonify({"error": f"服务器内部错误: {str(e)}"}), 500


@api_bp.route('/shiritori/history', methods=['GET'])
def get_history():
    """返回本局的单词历史和游戏状态"""
    words, state = _game().snapshot()
    return jsonify({
        "history": list(words),
        "state": state.value
    })
